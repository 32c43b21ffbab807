import argparse
import logging
import pprint
import sys

import dockerimage
import dockerimage.log
import dockerimage.model as dm
import dockerimage.serialisation as ds

logger = logging.getLogger(__name__)


def _print_image(image: dm.DockerImage, format: str):
    if format == 'json':
        print(ds.to_json(image, indent=2))
    elif format == 'yaml':
        print(ds.to_yaml(image), end='')
    elif format == 'pretty':
        pprint.pprint(ds.as_dict(image), sort_dicts=False)
    else:
        raise ValueError(format) # this is a bug


def parse(parsed):
    for image_reference in parsed.image_reference:
        try:
            image = dockerimage.parse(image_reference)
        except dm.InvalidFormat as invalid_format:
            print(f'Error: {invalid_format}')
            sys.exit(1)

        _print_image(image=image, format=parsed.format)


def render(parsed):
    image = dm.DockerImage(
        registry=parsed.registry,
        name=parsed.name,
        tag=parsed.tag,
        digest=parsed.digest,
    )
    try:
        image.validate()
    except dm.InvalidFormat as invalid_format:
        print(f'Error: {invalid_format}')
        sys.exit(1)

    print(dockerimage.render(image))


def validate(parsed):
    invalid_count = 0
    for image_reference in parsed.image_reference:
        if dockerimage.is_valid(image_reference):
            logger.info(f'valid: {image_reference}')
            continue

        invalid_count += 1
        print(f'invalid: {image_reference}')

    if invalid_count:
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(prog='dockerimage')
    subcmd_parsers = parser.add_subparsers(
        title='commands',
        required=True,
    )

    parser.add_argument('--verbose', '-v', action='store_true', default=False)

    parse_parser = subcmd_parsers.add_parser(
        'parse',
        aliases=('p',),
        help='parse image references and print their components',
    )
    parse_parser.set_defaults(callable=parse)
    parse_parser.add_argument(
        'image_reference',
        nargs='+',
    )
    parse_parser.add_argument(
        '--format',
        required=False,
        default='pretty',
        choices=('pretty', 'json', 'yaml'),
    )

    render_parser = subcmd_parsers.add_parser(
        'render',
        aliases=('r',),
        help='render an image reference from its components',
    )
    render_parser.set_defaults(callable=render)
    render_parser.add_argument('--registry', required=False, default=None)
    render_parser.add_argument('--name', required=True)
    render_parser.add_argument('--tag', required=False, default=None)
    render_parser.add_argument('--digest', required=False, default=None)

    validate_parser = subcmd_parsers.add_parser(
        'validate',
        aliases=('v',),
        help='check image references; exits w/ non-zero status if any is invalid',
    )
    validate_parser.set_defaults(callable=validate)
    validate_parser.add_argument(
        'image_reference',
        nargs='+',
    )

    parsed = parser.parse_args(argv)

    dockerimage.log.configure_logging(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
    )

    parsed.callable(parsed=parsed)


if __name__ == '__main__':
    main()
