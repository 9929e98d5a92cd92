import sys
import logging
import argparse
from pathlib import Path


logger = logging.getLogger(__name__)

COMPONENTS = ('scheme', 'user_info', 'host', 'port', 'path', 'query', 'fragment', 'host_kind')


def main(argv=None):
    from urigrammar import ParsedURIParts, match_uri
    from urigrammar.rules import URI

    ap = argparse.ArgumentParser(prog='urigrammar', description='Validate and split URIs as of RFC 3986')
    ap.add_argument('uris', nargs='*', help='URIs to check')
    ap.add_argument('-i', '--input', help='file to read URIs from, one per line', type=Path)
    ap.add_argument('-t', '--tree', help='pretty print parse trees', action='store_true')
    ap.add_argument('-s', '--scan', help='find URIs in the text of the input file', action='store_true')
    ap.add_argument('-v', '--verbose', help='log rejected inputs', action='store_true')
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.scan and args.input is None:
        ap.error('--scan needs an input file')

    texts = list(args.uris)

    input_file_path: Path = args.input
    if input_file_path is not None:
        if not input_file_path.is_file():
            print('File does not exist')
            sys.exit(2)

        with open(input_file_path, 'r') as fo:
            content = fo.read()
        logger.debug('read %d characters from %s', len(content), input_file_path)

        if args.scan:
            for node in URI.extractiter(content):
                if args.tree:
                    node.pp()
                else:
                    print(node.content)
            sys.exit(0)

        texts.extend(line.strip() for line in content.splitlines() if line.strip())

    if not texts:
        print('No URI given')
        sys.exit(2)

    all_valid = True
    for text in texts:
        tree = match_uri(text)
        if tree is None:
            all_valid = False
            logger.debug('rejected %r', text)
            print('invalid {}'.format(text))
            continue

        print('valid {}'.format(text))
        parts = ParsedURIParts.from_tree(tree)
        for name in COMPONENTS:
            print('  {}: {}'.format(name, getattr(parts, name)))
        if args.tree:
            tree.pp()

    sys.exit(0 if all_valid else 1)


if __name__ == '__main__':
    main()
