"""Application ports - interfaces for external adapters."""

from revchain.application.ports.patch_codec import Delta, PatchCodec
from revchain.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Delta",
    "PatchCodec",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
