"""Template cloning integration."""

from create_seed.core.cloner.abc import (
    TemplateCloner,
    TemplateSource,
    parse_template_ref,
)
from create_seed.core.cloner.fake import FakeTemplateCloner
from create_seed.core.cloner.real import RealTemplateCloner

__all__ = [
    "FakeTemplateCloner",
    "RealTemplateCloner",
    "TemplateCloner",
    "TemplateSource",
    "parse_template_ref",
]
