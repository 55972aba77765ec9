#!/usr/bin/env python3
"""
kcreate 命令行工具
目前支持 create persistentvolumeclaim（pvc）
"""

import argparse
import logging
import sys

from kcreate.cmd import createPersistentVolumeClaim
from kcreate.util.errors import KCreateError


def setup_logging(verbose: bool = False):
    """设置日志"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser():
    parser = argparse.ArgumentParser(prog='kcreate', description='Create resources on the API server')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    create_parser = subparsers.add_parser('create', help='Create a resource')
    create_subparsers = create_parser.add_subparsers(dest='resource', help='Resource type')
    createPersistentVolumeClaim.add_parser(create_subparsers)

    return parser


def main(argv=None):
    """主函数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command or not getattr(args, 'handler', None):
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)

    try:
        args.handler(args)
    except (KCreateError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
