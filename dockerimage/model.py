import dataclasses
import enum

import dockerimage.grammar as dg


class TagType(enum.Enum):
    SYMBOLIC = 'symbolic'
    DIGEST = 'digest'
    MIXED = 'mixed'
    NO_TAG = 'no_tag'


class InvalidFormatReason(enum.Enum):
    EMPTY = 'empty'
    NON_ASCII = 'non_ascii'
    MULTIPLE_DIGESTS = 'multiple_digests'
    REGISTRY = 'registry'
    NAME = 'name'
    TAG = 'tag'
    DIGEST = 'digest'
    STRUCTURE = 'structure'


class DockerImageError(ValueError):
    pass


class InvalidFormat(DockerImageError):
    '''
    raised if a value could not be decomposed into a valid (registry, name, tag, digest)-tuple

    `reason` classifies the failure (mostly for diagnostic purposes); `value` is the offending
    input (either the complete reference, or the segment that was rejected).
    '''
    def __init__(
        self,
        value,
        reason: InvalidFormatReason,
    ):
        self.value = value
        self.reason = reason
        super().__init__(value, reason)

    def __str__(self) -> str:
        return f'invalid docker image format ({self.reason.value}): {self.value!r}'


@dataclasses.dataclass(frozen=True, kw_only=True)
class DockerImage:
    '''
    a (parsed) docker image reference: `[registry/]name[:tag][@digest]`

    instances are typically created by `dockerimage.parse`. Direct instantiation is possible,
    but does not validate passed values (see `validate`).
    '''
    registry: str | None = None
    name: str
    tag: str | None = None
    digest: str | None = None

    def validate(self):
        if self.registry is not None and not dg.is_registry(self.registry):
            raise InvalidFormat(self.registry, InvalidFormatReason.REGISTRY)

        if not dg.is_name(self.name):
            raise InvalidFormat(self.name, InvalidFormatReason.NAME)

        # leading name-component would be read back as registry
        if self.registry is None and '/' in self.name:
            if dg.looks_like_registry(self.name.split('/', 1)[0]):
                raise InvalidFormat(self.name, InvalidFormatReason.NAME)

        if self.tag is not None and not dg.is_tag(self.tag):
            raise InvalidFormat(self.tag, InvalidFormatReason.TAG)

        if self.digest is not None and not dg.is_digest(self.digest):
            raise InvalidFormat(self.digest, InvalidFormatReason.DIGEST)

    @property
    def tag_type(self) -> TagType:
        if self.tag is not None and self.digest is not None:
            return TagType.MIXED
        if self.digest is not None:
            return TagType.DIGEST
        if self.tag is not None:
            return TagType.SYMBOLIC
        return TagType.NO_TAG

    @property
    def has_tag(self) -> bool:
        return self.tag_type is not TagType.NO_TAG

    @property
    def ref_without_tag(self) -> str:
        '''
        returns the image reference w/o symbolic tag and digest
        '''
        if self.registry is not None:
            return f'{self.registry}/{self.name}'
        return self.name

    @property
    def parsed_digest(self) -> tuple[str, str]:
        if not self.digest:
            raise ValueError(f'does not contain a digest: {str(self)=}')

        algorithm, hexdigest = self.digest.split(':', 1)
        return algorithm, hexdigest

    def with_tag(self, tag: str) -> 'DockerImage':
        if not dg.is_tag(tag):
            raise InvalidFormat(tag, InvalidFormatReason.TAG)

        return dataclasses.replace(self, tag=tag)

    def with_digest(self, digest: str) -> 'DockerImage':
        if not dg.is_digest(digest):
            raise InvalidFormat(digest, InvalidFormatReason.DIGEST)

        return dataclasses.replace(self, digest=digest)

    def as_dict(self) -> dict:
        return dataclasses.asdict(self)

    def __str__(self) -> str:
        image_ref = self.ref_without_tag
        if self.tag is not None:
            image_ref += f':{self.tag}'
        if self.digest is not None:
            image_ref += f'@{self.digest}'

        return image_ref
