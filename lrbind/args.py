import argparse


def parse(argv=None) -> dict:
    parser = argparse.ArgumentParser(
        prog="lrbind",
        description="""\
Generates the develop-parameter bindings of the Lightroom plug-in's settings \
table from lrbind's parameter registry. Run lrbind generate -h to get started.""",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("-q", "--quiet", action="store_true", default=False, help="Only print errors.")

    parsers = parser.add_subparsers(dest="command")

    generate = parsers.add_parser(name="generate", help="Generate Lua bindings (or docs) from the registry.", formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    params   = parsers.add_parser(name="params",   help="Search and list registered parameters.",            formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    # === GENERATE ===
    generate.add_argument("-o", "--output", metavar="FILE",  type=str, default=None,  help="Write to FILE instead of standard output.")
    generate.add_argument("-c", "--config", metavar="YAML",  type=str, default=None,  help="YAML file overriding the setter/getter references.")
    generate.add_argument(      "--table",  metavar="NAME",  type=str, default=None,  help="Wrap the blocks in a Lua table named NAME.")
    generate.add_argument(      "--check",  action="store_true",       default=False, help="Check that --output is up to date instead of writing it.")
    generate.add_argument(      "--docs",   action="store_true",       default=False, help="Generate markdown documentation instead of Lua bindings.")

    # === PARAMS ===
    params.add_argument("query", metavar="QUERY", type=str, nargs="?", default=None, help="Substring (case-insensitive) to search parameter names for.")
    params.add_argument(      "--category", metavar="CATEGORY", type=str, default=None,  help="Only list parameters of this category.")
    params.add_argument("-n", "--count",    action="store_true",          default=False, help="Only print registry statistics.")

    args: dict = vars(parser.parse_args(argv))

    if args["command"] is None:
        parser.print_help()
        parser.exit(2)

    if args["command"] == "generate" and args["check"] and args["output"] is None:
        parser.error("--check requires --output")

    return args
