"""External process execution integration."""

from create_seed.core.process.abc import ProcessRunner
from create_seed.core.process.fake import FakeProcessRunner, RunCall
from create_seed.core.process.real import RealProcessRunner

__all__ = ["FakeProcessRunner", "ProcessRunner", "RealProcessRunner", "RunCall"]
