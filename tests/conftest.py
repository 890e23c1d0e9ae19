import pytest

from csrgen.common.config import Settings
from csrgen.crypto import keys

TEMPLATE = """apiVersion: certificates.k8s.io/v1
kind: CertificateSigningRequest
metadata:
  name: {{ name }}
spec:
  request: {{ request }}
  usages:
  - client auth
"""


@pytest.fixture(scope="session")
def rsa_key():
    return keys.generate_private_key(2048)


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "template.yaml"
    path.write_text(TEMPLATE)
    return path


@pytest.fixture
def settings(tmp_path, template_file):
    out = tmp_path / "out"
    out.mkdir()
    return Settings(key_size=1024, template_path=str(template_file), output_root=str(out))
