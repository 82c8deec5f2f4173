import argparse
import pytest

from cloudiot_token.config import AccessTokenConfig, default_project_id
from cloudiot_token.exceptions import MissingArgument


@pytest.mark.parametrize(
    "environ,expected",
    (
        ({"GCLOUD_PROJECT": "foo"}, "foo"),
        ({"GOOGLE_CLOUD_PROJECT": "bar"}, "bar"),
        ({"GCLOUD_PROJECT": "foo", "GOOGLE_CLOUD_PROJECT": "bar"}, "foo"),
        ({"GCLOUD_PROJECT": "", "GOOGLE_CLOUD_PROJECT": "bar"}, "bar"),
        ({}, None),
    ),
)
def test_default_project_id(environ, expected):
    assert default_project_id(environ) == expected


def test_from_args():
    args = argparse.Namespace(
        command="generateGcpAccessToken",
        cloud_region="us-central1",
        project_id="proj1",
        registry_id="reg1",
        device_id="dev1",
        scopes="a b",
        algorithm="RS256",
        certificate_file="rsa_private.pem",
    )

    config = AccessTokenConfig.from_args(args)
    assert config == AccessTokenConfig("us-central1", "proj1", "reg1", "dev1", "a b", "RS256", "rsa_private.pem")


def test_validate():
    config = AccessTokenConfig("us-central1", "", "reg1", "dev1", "a b", "RS256", "rsa_private.pem")

    with pytest.raises(MissingArgument, match="project_id") as exc_info:
        config.validate()
    assert exc_info.value.field_name == "project_id"
