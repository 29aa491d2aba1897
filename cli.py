"""CLI interface for the name shortener."""

import argparse
import json
import sys

from tqdm import tqdm

from shortnames.config import load_config
from shortnames.data.name_loader import load_names
from shortnames.engine.shortener import NameShortener
from shortnames.errors import ShortnamesError
from shortnames.eval.evaluator import evaluate
from shortnames.logger import configure_logging
from shortnames.utils.text_io import encode_name, iter_decoded_lines


def build_config(args):
	"""Load the config file and apply command line overrides."""
	config = load_config(args.config)
	return config.override(
		lexicon_path=args.lexicon,
		given_names_path=args.given_names,
		capacity=args.capacity,
		overflow=args.overflow,
		encoding=args.encoding,
	)


def cmd_shorten(args):
	"""Shorten a single name."""
	config = build_config(args)
	shortener = NameShortener.from_config(config)

	short, shortest = shortener.shorten(args.name)
	print(short)
	print(shortest)


def cmd_filter(args):
	"""Shorten names read from stdin, one per line."""
	config = build_config(args)
	shortener = NameShortener.from_config(config)

	out = sys.stdout.buffer
	for name in iter_decoded_lines(sys.stdin.buffer, config.encoding):
		short, shortest = shortener.shorten(name)
		out.write(encode_name(short, config.encoding) + b'\n')
		out.write(encode_name(shortest, config.encoding) + b'\n')
		out.flush()


def cmd_shorten_batch(args):
	"""Shorten names from file."""
	config = build_config(args)
	shortener = NameShortener.from_config(config)

	names = load_names(args.input, encoding=config.encoding)
	print(f'Shortening {len(names)} names...')

	failed = 0
	with open(args.output, 'w', encoding='utf-8') as f:
		for name in tqdm(names, desc='Shortening'):
			try:
				short, shortest = shortener.shorten(name)
				result = {
					'name': name,
					'short': short,
					'shortest': shortest,
				}
			except ShortnamesError as e:
				tqdm.write(f"Error shortening '{name}': {e}")
				failed += 1
				result = {
					'name': name,
					'short': None,
					'shortest': None,
					'error': str(e),
				}

			f.write(json.dumps(result, ensure_ascii=False) + '\n')

	print(f'Processed {len(names)} names ({failed} failed), saved to {args.output}')


def cmd_eval(args):
	"""Evaluate the shortener against a gold file."""
	config = build_config(args)
	gold_path = args.gold or config.gold_path
	if not gold_path:
		print('No gold file given (use --gold or eval.gold_path in the config)')
		sys.exit(1)

	shortener = NameShortener.from_config(config)
	print(f'Gold set: {gold_path}')

	results = evaluate(gold_path, shortener=shortener, encoding=config.encoding)

	agg = results['aggregated']
	print('\n=== Evaluation Results ===')
	print(f"Short Exact Match: {agg.get('short_exact_match', 0.0):.4f}")
	if 'shortest_exact_match' in agg:
		print(f"Shortest Exact Match: {agg['shortest_exact_match']:.4f}")
	print(f"Avg Short CER: {agg.get('short_cer', 0.0):.4f}")
	print(f"Avg Short Compression: {agg.get('short_compression', 0.0):.4f}")
	print(f"Avg Shortest Compression: {agg.get('shortest_compression', 0.0):.4f}")
	print(f"Number of examples: {agg['num_examples']}")
	print(f"Errors: {agg['num_errors']}")

	if args.output:
		with open(args.output, 'w', encoding='utf-8') as f:
			json.dump(results, f, indent=2, ensure_ascii=False)
		print(f'\nDetailed results saved to {args.output}')


def add_common_arguments(parser):
	parser.add_argument('--config', type=str, help='Shortener config YAML')
	parser.add_argument('--lexicon', type=str, help='Abbreviation rules JSON (bundled rules if omitted)')
	parser.add_argument('--given-names', type=str, help='Given names JSON (bundled names if omitted)')
	parser.add_argument('--capacity', type=int, help='Buffer size in code units, including terminator')
	parser.add_argument('--overflow', type=str, choices=['error', 'grow'], help='Behaviour past capacity')
	parser.add_argument('--encoding', type=str, help='Input/output encoding')
	parser.add_argument('--verbose', action='store_true', help='Show debug logs')


def main(argv=None):
	parser = argparse.ArgumentParser(description='Place and street name shortener CLI')
	subparsers = parser.add_subparsers(dest='command', help='Command to run')

	# shorten
	shorten_parser = subparsers.add_parser('shorten', help='Shorten a single name')
	shorten_parser.add_argument('name', type=str, help='Full name to shorten')
	add_common_arguments(shorten_parser)

	# filter
	filter_parser = subparsers.add_parser('filter', help='Shorten names from stdin, one per line')
	add_common_arguments(filter_parser)

	# shorten-batch
	batch_parser = subparsers.add_parser('shorten-batch', help='Shorten names from file')
	batch_parser.add_argument('--input', type=str, required=True, help='Input file with one name per line')
	batch_parser.add_argument('--output', type=str, required=True, help='Output JSONL path')
	add_common_arguments(batch_parser)

	# eval
	eval_parser = subparsers.add_parser('eval', help='Evaluate against a gold file')
	eval_parser.add_argument('--gold', type=str, help='Gold TSV (name, short, shortest)')
	eval_parser.add_argument('--output', type=str, help='Output JSON path for detailed results')
	add_common_arguments(eval_parser)

	args = parser.parse_args(argv)

	if args.command is None:
		parser.print_help()
		return

	configure_logging(args.verbose)

	if args.command == 'shorten':
		cmd_shorten(args)
	elif args.command == 'filter':
		cmd_filter(args)
	elif args.command == 'shorten-batch':
		cmd_shorten_batch(args)
	elif args.command == 'eval':
		cmd_eval(args)
	else:
		parser.print_help()


if __name__ == '__main__':
	main()
