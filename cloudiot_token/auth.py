from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

import jwt
import logging
import time
from .error import SigningError

# Not configurable. Cloud IoT rejects device JWTs valid for more than 24h.
JWT_VALIDITY_SECONDS = 20 * 60

logger = logging.getLogger(__name__)


def read_private_key(certificate_file: str) -> bytes:
    """
    Read the PEM encoded device private key. Filesystem errors are left to the caller.
    """
    with open(certificate_file, "rb") as fd:
        return fd.read()


def create_jwt_for_device(
    project_id: str, algorithm: str, private_key: Union[str, bytes, PrivateKeyTypes]
) -> str:
    """
    Creates a device JWT for use with the `generateAccessToken` endpoint. The
    audience is the project ID, as for the Cloud IoT MQTT and HTTP bridges.

    Raises `SigningError` if the algorithm is unknown or doesn't match the key.
    """
    issued_at = int(time.time())
    claims = {
        "iat": issued_at,
        "exp": issued_at + JWT_VALIDITY_SECONDS,
        "aud": project_id,
    }

    try:
        token = jwt.encode(claims, private_key, algorithm=algorithm)
    except NotImplementedError:
        raise SigningError(f"Algorithm {algorithm} is not supported")
    except (jwt.PyJWTError, UnsupportedAlgorithm, ValueError, TypeError) as e:
        raise SigningError(f"Unable to sign the JWT with {algorithm}: {e}")

    logger.debug("Signed a JWT for project {} valid until {}".format(project_id, claims["exp"]))
    return token
