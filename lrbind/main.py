#!/usr/bin/env python3

import sys

from lrbind         import args, state
from lrbind.common  import LRBindException, print_error
from lrbind.printer import cons


def __run():
    # pylint: disable=import-outside-toplevel
    from lrbind.generate   import generate
    from lrbind.params_cmd import params

    {"generate": generate, "params": params}[state.ARG("command")]()


def main(argv=None) -> int:
    try:
        state.gARG = args.parse(argv)
        cons.quiet = state.ARG("quiet")

        __run()

    except LRBindException as exc:
        print_error(exc)
        return 1
    except KeyboardInterrupt:
        return 130
    except Exception:  # pylint: disable=broad-except
        cons.reset()
        cons.print_exception()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
