"""Upload collaborator protocols.

Contracts for the components the pipeline relies on but does not own:
image decoding, transport origin checks, error text and diagnostics.
"""

from .image_inspector import ImageInspector
from .upload_origin_verifier import UploadOriginVerifier
from .transport_error_describer import TransportErrorDescriber
from .environment_diagnostics import EnvironmentDiagnostics

__all__ = [
    "ImageInspector",
    "UploadOriginVerifier",
    "TransportErrorDescriber",
    "EnvironmentDiagnostics",
]
