"""
Error taxonomy for the capture pipeline.

Only AcquisitionError is fatal to a session. Extractor and encoder errors
are recovered per tick by the sampler and the capture manager.
"""


class PoseCaptureError(Exception):
    """Base class for all capture pipeline errors."""


class AcquisitionError(PoseCaptureError):
    """The frame source cannot deliver frames."""


class ExtractorError(PoseCaptureError):
    """The pose extractor failed on a frame."""


class EncoderError(PoseCaptureError):
    """A frame could not be encoded into an image artifact."""
