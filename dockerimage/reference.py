import dataclasses
import logging

import dockerimage.grammar as dg
import dockerimage.model as dm

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ReferenceParts:
    '''
    boundaries of an image reference, as determined by `split_reference`. Values are candidates
    only (i.e. they were not yet validated).
    '''
    registry: str | None
    name: str
    tag: str | None
    digest: str | None


def split_reference(image_reference: str) -> ReferenceParts:
    '''
    splits the given image reference into (unvalidated) registry, name, tag and digest candidates

    A colon is only treated as tag-delimiter if it occurs after the last slash (otherwise it is
    the port-separator of a registry). The leading path segment is only treated as registry if
    it contains a dot, a colon, or equals `localhost`.
    '''
    remainder, sep, digest = image_reference.partition('@')
    if not sep:
        digest = None
    elif '@' in digest:
        raise dm.InvalidFormat(image_reference, dm.InvalidFormatReason.MULTIPLE_DIGESTS)

    last_slash_idx = remainder.rfind('/')
    last_colon_idx = remainder.rfind(':')
    if last_colon_idx > last_slash_idx:
        tag = remainder[last_colon_idx + 1:]
        remainder = remainder[:last_colon_idx]
    else:
        tag = None

    left, sep, right = remainder.partition('/')
    if sep and dg.looks_like_registry(left):
        registry = left
        name = right
    else:
        registry = None
        name = remainder

    return ReferenceParts(
        registry=registry,
        name=name,
        tag=tag,
        digest=digest,
    )


def parse(image_reference: str) -> dm.DockerImage:
    '''
    parses the given image reference into a validated `DockerImage`

    raises `dockerimage.model.InvalidFormat` if the reference is not valid
    '''
    if not isinstance(image_reference, str):
        raise dm.InvalidFormat(image_reference, dm.InvalidFormatReason.STRUCTURE)

    if not image_reference:
        raise dm.InvalidFormat(image_reference, dm.InvalidFormatReason.EMPTY)

    if not image_reference.isascii():
        raise dm.InvalidFormat(image_reference, dm.InvalidFormatReason.NON_ASCII)

    try:
        parts = split_reference(image_reference)
        image = dm.DockerImage(
            registry=parts.registry,
            name=parts.name,
            tag=parts.tag,
            digest=parts.digest,
        )
        image.validate()
    except dm.InvalidFormat as invalid_format:
        logger.debug(f'rejected {image_reference=}: {invalid_format}')
        raise

    return image
