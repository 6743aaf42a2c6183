import argparse
import logging
import sys
from textloader.config import load_config, loader_options, validate_config
from textloader.exceptions import TextLoaderError
from textloader.loader import TextLoader


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='textloader', description='Inspect a delimited text dataset')
    parser.add_argument('data_file', nargs='?', help='Path to the data file')
    parser.add_argument('--config', type=str, default=None, help='Path to YAML config file')
    parser.add_argument('--separator', type=str, default=None, help='Column separator (default: tab)')
    parser.add_argument('--label-column', type=int, default=None)
    parser.add_argument('--weight-column', type=int, default=None)
    parser.add_argument('--name-column', type=int, default=None)
    parser.add_argument('--label-map', type=str, default=None, help='Label map file')
    parser.add_argument('--no-cache', action='store_true', help='Stream rows from disk instead of caching them')
    parser.add_argument('--head', type=int, default=5, help='Number of examples to print')
    return parser


def config_from_args(args) -> dict:
    if args.config:
        config = load_config(args.config)
    else:
        config = {}
    if args.data_file:
        config['data_file'] = args.data_file
    overrides = {
        'separator': args.separator,
        'label_column': args.label_column,
        'weight_column': args.weight_column,
        'name_column': args.name_column,
        'label_map_file': args.label_map,
    }
    config.update({k: v for k, v in overrides.items() if v is not None})
    if args.no_cache:
        config['cache'] = False
    validate_config(config)
    return config


def summarize(loader: TextLoader, head: int = 5) -> int:
    layout = loader.layout
    print(f"Format: {'sparse' if loader.is_sparse else 'dense'}")
    print(f"Dimension: {loader.dimension}")
    print(f"Features: {', '.join(loader.feature_names)}")
    print(f"Label column: {layout.label_column} ({layout.column_names[layout.label_column]})")
    if layout.weight_column is not None:
        print(f"Weight column: {layout.weight_column} ({layout.column_names[layout.weight_column]})")
    if layout.name_column is not None:
        print(f"Name column: {layout.name_column} ({layout.column_names[layout.name_column]})")
    count = 0
    for example in loader:
        if count < head:
            print(f"  {example}")
        count += 1
    print(f"Examples: {count}")
    return count


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.data_file and not args.config:
        parser.error('either a data file or --config is required')

    try:
        config = config_from_args(args)
        options = loader_options(config)
        print(f"\n[INFO] Loading {config['data_file']}\n")
        with TextLoader(config['data_file'], **options) as loader:
            summarize(loader, head=args.head)
    except TextLoaderError as e:
        print(f"Load error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
