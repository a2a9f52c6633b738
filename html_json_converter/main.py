#!/usr/bin/env python3
"""
Command line interface for the HTML/JSON converter.

Converts single files in either direction, or a whole directory of HTML
files into one JSON document keyed by file name.
"""

import argparse
import json
import logging
import os
import sys
from typing import Dict, List, Optional

from html_json_converter.builder import NodeLike
from html_json_converter.converter import ConverterConfig, HTMLJSONConverter
from html_json_converter.dom import get_parser
from html_json_converter.exceptions import ConverterError
from html_json_converter.utils.config import Config
from html_json_converter.utils.logging import (
    PerformanceLogger,
    get_default_log_file,
    log_exception,
    setup_logging,
)

logger = logging.getLogger("html_json_converter.main")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Convert HTML to JSON node trees and back")
    parser.add_argument('--config', type=str, default=None, help='Path to a JSON configuration file')
    parser.add_argument('--parser', choices=['html5lib', 'soup'], default=None,
                        help='Markup parser to use')
    parser.add_argument('--spaces', action='store_true', help='Indent HTML output with spaces')
    parser.add_argument('--tab-size', type=int, default=None, help='Indentation units per level')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', type=str, default=None, help='Also write logs to this file '
                        '(with --debug, defaults to ~/.html_json_converter/logs)')
    
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    batch = subparsers.add_parser('batch', help='Convert every .html file in a directory')
    batch.add_argument('input_dir', nargs='?', default=None, help='Directory with .html files')
    batch.add_argument('-o', '--output', default=None, help='JSON file to write')
    
    to_json = subparsers.add_parser('to-json', help='Convert one HTML file to JSON')
    to_json.add_argument('file', help='HTML file')
    
    to_html = subparsers.add_parser('to-html', help='Convert one JSON file to HTML')
    to_html.add_argument('file', help='JSON file holding a node tree')
    
    return parser.parse_args(argv)


def build_converter(args: argparse.Namespace, config: Config) -> HTMLJSONConverter:
    """Create a converter from the configuration file and command line overrides."""
    settings = config.converter_config()
    use_tab = False if args.spaces else settings.use_tab
    tab_size = args.tab_size if args.tab_size is not None else settings.tab_size
    
    parser_name = args.parser or config.get("batch.parser", "html5lib")
    converter_config = ConverterConfig(use_tab=use_tab, tab_size=tab_size,
                                       custom_elements=settings.custom_elements)
    return HTMLJSONConverter(converter_config, parser=get_parser(parser_name))


def read_file(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def convert_directory(converter: HTMLJSONConverter, input_dir: str, output_file: str) -> int:
    """
    Convert every .html file in a directory and write the results as JSON.
    
    Files that fail to convert are logged and left out of the output.
    
    Args:
        converter: Converter to use
        input_dir: Directory to scan (not recursive)
        output_file: JSON file to write
        
    Returns:
        int: Number of files that failed
    """
    files = sorted(name for name in os.listdir(input_dir) if name.endswith('.html'))
    results: Dict[str, dict] = {}
    failures = 0
    perf = PerformanceLogger(logger, "batch")
    
    for name in files:
        try:
            with perf.measure(name):
                results[name] = converter.to_json(read_file(os.path.join(input_dir, name)))
        except ConverterError as e:
            failures += 1
            log_exception(logger, e, f"Failed to convert {name}")
    
    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(results, f, indent=2, ensure_ascii=False)
    
    logger.info(f"{output_file} created with {len(results)} of {len(files)} files "
                f"in {perf.total:.2f} seconds")
    return failures


def read_tree(path: str) -> NodeLike:
    """
    Load a node tree from a JSON file.
    
    Raises:
        ConverterError: If the file does not hold an element object or a string
    """
    node = json.loads(read_file(path))
    if not isinstance(node, (dict, str)):
        raise ConverterError(f"{path} must hold a node object or a string",
                             {"found": type(node).__name__})
    return node


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line interface."""
    args = parse_arguments(argv)
    log_file = args.log_file
    if log_file is None and args.debug:
        log_file = get_default_log_file()
    setup_logging(debug=args.debug, log_file=log_file)
    
    try:
        config = Config(args.config)
        converter = build_converter(args, config)
        
        if args.command == 'batch':
            input_dir = args.input_dir or config.get("batch.input_dir", "html")
            output_file = args.output or config.get("batch.output_file", "output.json")
            failures = convert_directory(converter, input_dir, output_file)
            return 1 if failures else 0
        
        if args.command == 'to-json':
            node = converter.to_json(read_file(args.file))
            print(json.dumps(node, indent=2, ensure_ascii=False))
        else:
            node = read_tree(args.file)
            print(converter.to_html(node))
        return 0
    except (ConverterError, OSError, ValueError, KeyError) as e:
        log_exception(logger, e, "Conversion failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
