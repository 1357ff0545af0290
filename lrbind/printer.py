import typing

import rich, rich.console


class LRBindPrinter:
    """
    Status output for the command line.

    Everything goes to stderr so that generated text on stdout can be piped
    or redirected untouched. When quiet, only forced messages (errors) are
    shown.
    """

    def __init__(self):
        self.stack = []
        self.quiet = False
        self.raw   = rich.console.Console(stderr=True)

    def reset(self):
        self.stack = []

    def indent(self, msg: str = None):
        msg = msg if msg is not None else "  "

        self.stack.append(msg)

    def unindent(self, times: int = None):
        if times is None:
            times = 1

        for _ in range(times):
            self.stack.pop()

    def print(self, msg: typing.Any = None, *args, force: bool = False, **kwargs):
        if self.quiet and not force:
            return

        if msg is None:
            msg = ""

        lines = str(msg).split('\n')
        self.raw.print('\n'.join(f"{''.join(self.stack)}{s}" for s in lines), *args, soft_wrap=True, **kwargs)

    def print_exception(self):
        self.raw.print_exception()


cons = LRBindPrinter()
