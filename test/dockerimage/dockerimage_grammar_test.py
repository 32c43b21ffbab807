import pytest

import dockerimage.grammar as dg


@pytest.mark.parametrize('registry', (
    'docker.io',
    'ghcr.io',
    'eu.gcr.io',
    'my-registry.local:5000',
    'localhost',
    'localhost:5000',
    'myhost:443',
    'Registry.Example.COM',
    '127.0.0.1:5000',
))
def test_is_registry(registry):
    assert dg.is_registry(registry)


@pytest.mark.parametrize('registry', (
    '',
    'myhost', # could not be told apart from first name-component
    'http:',
    'docker.io:',
    'docker.io:123456',
    '-docker.io',
    'docker-.io',
    'docker..io',
    'docker.io/',
    'docker🚀.io',
))
def test_is_registry_rejects(registry):
    assert not dg.is_registry(registry)


@pytest.mark.parametrize('name', (
    'nginx',
    'library/nginx',
    'my-image',
    'my--image',
    'my_image',
    'my__image',
    'my.image',
    'a/b/c/d',
    '0',
))
def test_is_name(name):
    assert dg.is_name(name)


@pytest.mark.parametrize('name', (
    '',
    'NGINX',
    'Nginx',
    'library//nginx',
    '/nginx',
    'nginx/',
    '-nginx',
    'nginx-',
    'my___image',
    'my..image',
    'my._image',
    'nginx:',
    'nginx🚀',
))
def test_is_name_rejects(name):
    assert not dg.is_name(name)


def test_is_tag():
    assert dg.is_tag('latest')
    assert dg.is_tag('stable-alpine3.20-perl')
    assert dg.is_tag('V1.0.0')
    assert dg.is_tag('_private')
    assert dg.is_tag('a' * 128)

    assert not dg.is_tag('')
    assert not dg.is_tag('a' * 129)
    assert not dg.is_tag('.hidden')
    assert not dg.is_tag('-dash')
    assert not dg.is_tag('lat@est')
    assert not dg.is_tag('lat🚀est')
    assert not dg.is_tag('1:2')


def test_is_digest():
    assert dg.is_digest('sha256:' + 'a' * 64)
    assert dg.is_digest('sha384:' + '0' * 96)
    assert dg.is_digest('sha512:' + 'f' * 128)

    # wrong length
    assert not dg.is_digest('sha256:' + 'a' * 63)
    assert not dg.is_digest('sha256:' + 'a' * 65)
    assert not dg.is_digest('sha512:' + 'a' * 64)
    # uppercase hex
    assert not dg.is_digest('sha256:' + 'A' * 64)
    # unknown algorithm
    assert not dg.is_digest('md5:' + 'a' * 32)
    assert not dg.is_digest('SHA256:' + 'a' * 64)
    # malformed
    assert not dg.is_digest('a' * 64)
    assert not dg.is_digest('sha256:not-a-hex-string')
    assert not dg.is_digest('sha256:' + 'a' * 31 + '🚀' + 'a' * 32)


def test_split_digest():
    hexdigest = 'ab' * 32
    algorithm, parsed_hexdigest = dg.split_digest(f'sha256:{hexdigest}')

    assert algorithm is dg.DigestAlgorithm.SHA256
    assert parsed_hexdigest == hexdigest

    assert dg.split_digest('sha256') is None


def test_digest_algorithm_from_name():
    assert dg.DigestAlgorithm.from_name('sha256') is dg.DigestAlgorithm.SHA256
    assert dg.DigestAlgorithm.from_name('sha512') is dg.DigestAlgorithm.SHA512
    assert dg.DigestAlgorithm.from_name('crc32') is None


def test_looks_like_registry():
    assert dg.looks_like_registry('docker.io')
    assert dg.looks_like_registry('myhost:5000')
    assert dg.looks_like_registry('localhost')

    assert not dg.looks_like_registry('library')
    assert not dg.looks_like_registry('localhost2')


def test_predicates_reject_non_str():
    for candidate in (None, 42, b'nginx'):
        assert not dg.is_registry(candidate)
        assert not dg.is_name(candidate)
        assert not dg.is_tag(candidate)
        assert not dg.is_digest(candidate)
