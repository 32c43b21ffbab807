'''
parsing and rendering of docker image references (`[registry/]name[:tag][@digest]`)
'''

import dockerimage.model as dm
import dockerimage.reference as dr
import dockerimage.serialisation as ds

DockerImage = dm.DockerImage
InvalidFormat = dm.InvalidFormat


def parse(image_reference: str) -> dm.DockerImage:
    return dr.parse(image_reference)


def render(image: dm.DockerImage) -> str:
    return str(image)


def is_valid(image_reference: str) -> bool:
    try:
        dr.parse(image_reference)
        return True
    except dm.InvalidFormat:
        return False


def to_docker_image(
    image: str | dict | dm.DockerImage,
) -> dm.DockerImage:
    '''
    returns a validated `DockerImage` for the passed-in value. For convenience, if passed-in
    value is already a `DockerImage`, it is returned unchanged (w/o re-validation).
    '''
    if isinstance(image, dm.DockerImage):
        return image
    if isinstance(image, str):
        return dr.parse(image)
    if isinstance(image, dict):
        return ds.from_dict(image)

    raise dm.InvalidFormat(image, dm.InvalidFormatReason.STRUCTURE)
