'''
segment grammar for docker image references

all patterns are compiled once upon import and only read afterwards. Matching is always done
using `fullmatch`, and restricted to ASCII (non-ASCII input never matches).
'''

import enum
import re


class DigestAlgorithm(enum.Enum):
    '''
    registered digest algorithms; value is the length of the (hex-encoded) digest
    '''
    SHA256 = 64
    SHA384 = 96
    SHA512 = 128

    @property
    def algorithm_name(self) -> str:
        return self.name.lower()

    @staticmethod
    def from_name(name: str) -> 'DigestAlgorithm | None':
        for algorithm in DigestAlgorithm:
            if algorithm.algorithm_name == name:
                return algorithm
        return None


def _group(pattern: str) -> str:
    return f'(?:{pattern})'


def _optional(pattern: str) -> str:
    return f'{_group(pattern)}?'


def _repeated(pattern: str) -> str:
    return f'{_group(pattern)}*'


_ALPHA_NUMERIC = r'[a-z0-9]+'
_SEPARATOR = r'(?:\.|_|__|-+)'
_NAME_COMPONENT = _ALPHA_NUMERIC + _repeated(_SEPARATOR + _ALPHA_NUMERIC)
_NAME = _NAME_COMPONENT + _repeated('/' + _NAME_COMPONENT)

_HOSTNAME_LABEL = r'[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?'
_HOSTNAME = _HOSTNAME_LABEL + _repeated(r'\.' + _HOSTNAME_LABEL)
_PORT = r'[0-9]{1,5}'
_REGISTRY = _HOSTNAME + _optional(':' + _PORT)

_TAG = r'[A-Za-z0-9_][A-Za-z0-9._-]{0,127}'

_DIGEST_HEX = r'[a-f0-9]+'

name_pattern = re.compile(_NAME, flags=re.ASCII)
registry_pattern = re.compile(_REGISTRY, flags=re.ASCII)
tag_pattern = re.compile(_TAG, flags=re.ASCII)
digest_hex_pattern = re.compile(_DIGEST_HEX, flags=re.ASCII)

LOCALHOST = 'localhost'


def looks_like_registry(candidate: str) -> bool:
    '''
    heuristic deciding whether the leading path segment of an image reference denotes a
    registry (as opposed to the first component of the image name)
    '''
    return '.' in candidate or ':' in candidate or candidate == LOCALHOST


def is_registry(candidate: str) -> bool:
    if not isinstance(candidate, str) or not candidate.isascii():
        return False
    if not registry_pattern.fullmatch(candidate):
        return False
    # otherwise, the registry would be read back as part of the name
    return looks_like_registry(candidate)


def is_name(candidate: str) -> bool:
    if not isinstance(candidate, str) or not candidate.isascii():
        return False
    return bool(name_pattern.fullmatch(candidate))


def is_tag(candidate: str) -> bool:
    if not isinstance(candidate, str) or not candidate.isascii():
        return False
    return bool(tag_pattern.fullmatch(candidate))


def split_digest(candidate: str) -> tuple[DigestAlgorithm, str] | None:
    '''
    returns a two-tuple of (algorithm, hexdigest) or None if the given digest is not valid
    '''
    if not isinstance(candidate, str) or not candidate.isascii():
        return None

    algorithm_name, sep, hexdigest = candidate.partition(':')
    if not sep:
        return None

    if not (algorithm := DigestAlgorithm.from_name(algorithm_name)):
        return None

    if len(hexdigest) != algorithm.value:
        return None

    if not digest_hex_pattern.fullmatch(hexdigest):
        return None

    return algorithm, hexdigest


def is_digest(candidate: str) -> bool:
    return split_digest(candidate) is not None
