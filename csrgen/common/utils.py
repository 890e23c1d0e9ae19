# csrgen/common/utils.py
import base64
import os


def b64(b: bytes) -> str:
    return base64.b64encode(b).decode()


def bundle_dir(root: str, name: str) -> str:
    return os.path.join(root, name)
