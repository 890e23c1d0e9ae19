"""Key -> CSR -> manifest pipeline for a single identity.

Steps run strictly in order and the first failure propagates to the caller.
Artifacts written before a failure stay on disk.
"""
import logging
from typing import Optional

from pydantic import BaseModel

from csrgen.common.config import Settings, load_settings
from csrgen.common.errors import ArgumentError
from csrgen.common.utils import b64
from csrgen.crypto import csr as crypto_csr
from csrgen.crypto import keys as crypto_keys
from csrgen.crypto.subject import Subject
from csrgen.storage.manifest import render_manifest
from csrgen.storage.output import OutputBundle

log = logging.getLogger(__name__)


class PipelineResult(BaseModel):
    name: str
    subject: str
    directory: str
    key_path: str
    csr_path: str
    encoded_path: str
    manifest_path: str


def run(name: str, settings: Optional[Settings] = None, subject: Optional[Subject] = None) -> PipelineResult:
    """Generate key, CSR, encoded CSR and manifest for name.

    subject defaults to Subject.for_name(name).
    """
    if not name:
        raise ArgumentError("Name was not supplied. Please supply name as first argument")
    settings = settings or load_settings()
    subject = subject or Subject.for_name(name)

    bundle = OutputBundle.create(settings.output_root, name)

    private_key = crypto_keys.generate_private_key(settings.key_size)
    bundle.write(bundle.key_path, crypto_keys.encode_private_key_pem(private_key))
    log.info("Key saved to: %s", bundle.key_path)

    csr_pem = crypto_csr.build_csr(subject, private_key)
    bundle.write(bundle.csr_path, csr_pem)
    cn = crypto_csr.get_common_name(crypto_csr.load_csr(csr_pem))
    log.info("Certificate request for CN=%s saved to: %s", cn, bundle.csr_path)

    encoded = b64(csr_pem)
    bundle.write(bundle.encoded_path, encoded)

    manifest = render_manifest(name, encoded, settings.template_path)
    bundle.write(bundle.manifest_path, manifest)
    log.info("Manifest saved to: %s", bundle.manifest_path)

    return PipelineResult(
        name=name,
        subject=subject.oneline(),
        directory=bundle.directory,
        key_path=bundle.key_path,
        csr_path=bundle.csr_path,
        encoded_path=bundle.encoded_path,
        manifest_path=bundle.manifest_path,
    )


__all__ = ["run", "PipelineResult"]
