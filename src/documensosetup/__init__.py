"""
documenso-setup - Rootless Podman deployment for Documenso
"""

__version__ = "0.3.0"

from .core import Provisioner, ProvisionerError

__all__ = ["Provisioner", "ProvisionerError"]
