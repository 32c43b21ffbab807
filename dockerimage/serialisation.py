import json

import dacite
import yaml

import dockerimage.model as dm


def as_dict(image: dm.DockerImage) -> dict:
    return image.as_dict()


def from_dict(raw: dict) -> dm.DockerImage:
    '''
    deserialises the given dict (with attributes `registry`, `name`, `tag`, `digest`) into a
    `DockerImage`. The same validation as for parsing is applied; unknown attributes are
    rejected.
    '''
    if not isinstance(raw, dict):
        raise dm.InvalidFormat(raw, dm.InvalidFormatReason.STRUCTURE)

    try:
        image = dacite.from_dict(
            data_class=dm.DockerImage,
            data=raw,
            config=dacite.Config(strict=True),
        )
    except dacite.DaciteError as de:
        raise dm.InvalidFormat(raw, dm.InvalidFormatReason.STRUCTURE) from de

    image.validate()
    return image


def to_json(image: dm.DockerImage, indent: int | None=None) -> str:
    return json.dumps(
        obj=as_dict(image),
        indent=indent,
    )


def from_json(raw: str | bytes) -> dm.DockerImage:
    try:
        parsed = json.loads(raw)
    except ValueError as ve:
        raise dm.InvalidFormat(raw, dm.InvalidFormatReason.STRUCTURE) from ve

    return from_dict(parsed)


def to_yaml(image: dm.DockerImage) -> str:
    return yaml.safe_dump(
        as_dict(image),
        sort_keys=False,
    )
