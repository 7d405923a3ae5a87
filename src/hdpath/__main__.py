"""
hdpath cli
"""
import argparse
import json
import os
import sys

import hdpath
from hdpath import __version__
from hdpath.config import Config
from hdpath.config import DEFAULT_CONFIG_DIR
from hdpath.config import SHAPES
from hdpath.errors import HDPathError
from hdpath.path_account import AccountHDPath
from hdpath.path_custom import CustomHDPath
from hdpath.path_short import ShortHDPath
from hdpath.path_standard import StandardHDPath

SHAPE_TYPES = {
    "custom": CustomHDPath,
    "account": AccountHDPath,
    "short": ShortHDPath,
    "standard": StandardHDPath,
}


class RawDescriptionDefaultsHelpFormatter(
    argparse.RawDescriptionHelpFormatter, argparse.ArgumentDefaultsHelpFormatter
):
    pass


class ExplicitOption(argparse.Action):
    """
    Custom Action used for checking whether an option has been set explicitly
    (rather than by default)
    """

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        setattr(namespace, self.dest + "__explicit", True)


def format_option(o):
    format_map = {
        "b": "bin",
        "x": "hex",
        "raw": "raw",
        "bin": "bin",
        "hex": "hex",
    }
    return format_map[o]


def add_common_arguments(parser: argparse.ArgumentParser, include_shape: bool = True):
    parser.add_argument(
        "--config-dir",
        type=str,
        action=ExplicitOption,
        help="Directory to look for optional config file (config.toml or config.json). "
        + "TOML will take precedence over JSON if both files are defined, "
        + "but TOML is only available for python 3.11+ ",
        default=DEFAULT_CONFIG_DIR,
    )
    parser.add_argument(
        "-L",
        "--log-level",
        default="error",
        action=ExplicitOption,
        metavar="LOG_LEVEL",
        choices=["trace", "debug", "info", "warning", "error"],
        help="log level, e.g. 'trace', 'debug', 'info', 'warning', or 'error'",
    )
    if include_shape:
        parser.add_argument(
            "--shape",
            "-s",
            metavar="SHAPE",
            default="custom",
            action=ExplicitOption,
            choices=SHAPES,
            help="path shape the input must match, "
            + "'custom' (any), 'account', 'short', or 'standard'",
        )


def setup_parser() -> argparse.ArgumentParser:
    """
    Setup argument parser
    Returns:
        argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="hdpath",
        description="""hdpath is a cli tool and pure Python library for BIP32 HD paths.

Paths are written as m/44'/0'/0'/0/0; H or h may be used instead of ' to mark
hardened values, and M/ instead of m/. Output always uses m/ and '.

Binary form is one byte element count followed by 4-byte big endian child numbers.

Examples:
    $ hdpath parse "M/84H/0H/0H/1/3" --shape standard

    $ hdpath encode "m/44'/0'/0'/0/0" -0x

    $ echo 038000002c8000000080000000 | hdpath decode -1x --shape account
""",
        formatter_class=RawDescriptionDefaultsHelpFormatter,
    )
    parser.add_argument("-v", "-V", "--version", action="version", version=__version__)

    sub_parser = parser.add_subparsers(
        dest="subcommand",
        metavar="[subcommand]",
        description="""
Use hdpath <subcommand> -h for help on each command""",
    )

    parse_parser = sub_parser.add_parser(
        "parse",
        help="Validate path and print in canonical form",
        description="""
Validate path against the given shape and print it in canonical form.

Use --json to describe the path elements and fields as a json object instead.""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parse_parser.add_argument("path", help="HD path, e.g. m/44'/0'/0'/0/0")
    parse_parser.add_argument(
        "--json", action="store_true", help="print path description as json"
    )
    add_common_arguments(parse_parser)

    encode_parser = sub_parser.add_parser(
        "encode",
        help="Encode path to binary form",
    )
    encode_parser.add_argument("path", help="HD path, e.g. m/44'/0'/0'/0/0")
    add_common_arguments(encode_parser)
    encode_parser.add_argument(
        "--out-file",
        "-out",
        "-o",
        default="-",
        type=argparse.FileType("w"),
        help="output data file",
    )
    encode_parser.add_argument(
        "-0",
        "--output-format",
        metavar="OUTPUT_FORMAT",
        default="hex",
        const="raw",
        nargs="?",
        action=ExplicitOption,
        type=format_option,
        help="raw binary (-0), binary string (-0b), or hexadecimal string (-0x)",
    )

    decode_parser = sub_parser.add_parser(
        "decode",
        help="Decode path from binary form",
    )
    add_common_arguments(decode_parser)
    decode_parser.add_argument(
        "--in-file",
        "-in",
        "-i",
        default="-",
        type=argparse.FileType("r"),
        # https://github.com/python/cpython/issues/58364
        help="input data file",
    )
    decode_parser.add_argument(
        "-1",
        "--input-format",
        metavar="INPUT_FORMAT",
        nargs="?",
        default="hex",
        const="raw",
        action=ExplicitOption,
        type=format_option,
        help="raw binary (-1), binary string (-1b), or hexadecimal string (-1x)",
    )

    address_parser = sub_parser.add_parser(
        "address",
        help="Derive address path from account path",
        description="""
Print the standard path of an address within an account, e.g.

    $ hdpath address "m/84'/0'/0'" 1 3
    m/84'/0'/0'/1/3""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    address_parser.add_argument(
        "account", help="account path, e.g. m/84'/0'/0' or m/84'/0'/0'/x/x"
    )
    address_parser.add_argument("change", type=int, help="0 receive, 1 change")
    address_parser.add_argument("index", type=int, help="address index")
    add_common_arguments(address_parser, include_shape=False)
    return parser


def describe(path: hdpath.HDPath) -> dict:
    """
    Return json-serializable description of path
    """
    description = {
        "path": path.to_string(),
        "length": len(path),
        "values": [
            {"hardened": hardened, "number": number}
            for hardened, number in path.child_numbers()
        ],
        "bytes": path.to_bytes().hex(),
    }
    if not isinstance(path, CustomHDPath):
        description["purpose"] = path.purpose.name
        for field in ["coin_type", "account", "change", "index"]:
            if hasattr(path, field):
                description[field] = getattr(path, field)
    return description


def main():
    parser = setup_parser()
    args = parser.parse_args()
    if not args.subcommand:
        parser.print_help()
        return

    config = Config(**vars(args))
    config.load_config(config_dir=args.config_dir)
    explicit_options = {
        option: value
        for option, value in vars(args).items()
        if getattr(args, option + "__explicit", False)
    }
    config.update(**explicit_options)
    log = hdpath.init_logging(config.log_level)
    log.debug(f"config: {vars(config)}")

    try:
        if args.subcommand == "parse":
            path = SHAPE_TYPES[config.shape].parse(args.path)
            if args.json:
                print(json.dumps(describe(path)))
                return
            print(path.to_string())
        elif args.subcommand == "encode":
            path = SHAPE_TYPES[config.shape].parse(args.path)
            hdpath.write_bytes(
                path.to_bytes(), args.out_file, output_format=config.output_format
            )
        elif args.subcommand == "decode":
            data = hdpath.read_bytes(args.in_file, input_format=config.input_format)
            path = SHAPE_TYPES[config.shape].from_bytes(data)
            sys.stdout.write(path.to_string() + os.linesep)
        elif args.subcommand == "address":
            account = AccountHDPath.parse(args.account)
            print(account.address_at(args.change, args.index).to_string())
        else:
            raise ValueError("command not recognized")
    except HDPathError as err:
        log.error(err)
        sys.exit(1)


if __name__ == "__main__":
    main()
