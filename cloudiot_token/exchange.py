from typing import Any, NamedTuple, Optional

import aiohttp
import asyncio
import logging

from .auth import create_jwt_for_device, read_private_key
from .config import AccessTokenConfig
from .error import EmptyTokenError, IotException
from .utils import raise_for_status_with_message, read_body

BASE_TOKEN_URL = "https://cloudiottoken.googleapis.com"
logger = logging.getLogger(__name__)


class ExchangeResult(NamedTuple):
    """
    Outcome of a token exchange. Exactly one of `token` and `error` is set.
    """

    token: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_access_token_url(
    cloud_region: str, project_id: str, registry_id: str, device_id: str, scope: str
) -> str:
    """
    Returns the `generateAccessToken` URL for the given device. Values are interpolated as is,
    space delimited scopes included; only aiohttp's default URL normalization happens on send.
    """
    return (
        f"{BASE_TOKEN_URL}/v1alpha1/projects/{project_id}/locations/{cloud_region}"
        f"/registries/{registry_id}/devices/{device_id}:generateAccessToken?scope={scope}"
    )


async def exchange_jwt_for_access_token(
    cloud_region: str,
    project_id: str,
    registry_id: str,
    device_id: str,
    jwt: str,
    scope: str,
) -> ExchangeResult:
    """
    Exchanges a device JWT for a GCP access token. The response body is returned verbatim:
    decoded when it is JSON, as text otherwise. An empty body is a failure.

    Failures are logged and reported through the returned `ExchangeResult`, they are never raised.
    """
    url = build_access_token_url(cloud_region, project_id, registry_id, device_id, scope)
    headers = {
        "Authorization": f"Bearer {jwt}",
        "Content-Type": "application/json",
        "Cache-Control": "no-cache",
    }

    logger.info('Exchanging the JWT of device "{}" for an access token'.format(device_id))
    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(url, headers=headers, json={}) as resp:
                await raise_for_status_with_message(resp)
                token = await read_body(resp)
                if token is None:
                    raise EmptyTokenError("The token endpoint answered with an empty body")
    except (aiohttp.ClientError, asyncio.TimeoutError, IotException, ValueError) as e:
        logger.error("Received error: {!r}".format(e))
        return ExchangeResult(error=e)

    logger.debug('Access token generated for device "{}"'.format(device_id))
    return ExchangeResult(token=token)


async def generate_gcp_access_token(config: AccessTokenConfig) -> ExchangeResult:
    """
    Reads the device private key, signs a JWT with it and exchanges it for a GCP access token.

    Errors reading the key or signing the JWT are raised, the exchange never raises.
    """
    private_key = read_private_key(config.certificate_file)
    jwt = create_jwt_for_device(config.project_id, config.algorithm, private_key)

    return await exchange_jwt_for_access_token(
        config.cloud_region,
        config.project_id,
        config.registry_id,
        config.device_id,
        jwt,
        config.scopes,
    )
