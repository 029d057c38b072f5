"""Default attribute templates emitted by the capability composers.

Templates are target-language attribute text. Multi-line templates are a single
binding whose lines are rendered together.
"""

from __future__ import annotations

from typing import Final

SERDE_SERIALIZE_DESERIALIZE: Final[str] = (
    "#[derive(serde::Serialize, serde::Deserialize)]"
)
SERDE_SERIALIZE: Final[str] = "#[derive(serde::Serialize)]"
SERDE_DESERIALIZE: Final[str] = "#[derive(serde::Deserialize)]"

SERDE_AS: Final[str] = "#[serde_with::serde_as]\n#[serde_with::skip_serializing_none]"

# convert-on-set, strip the Option wrapper, fall back to Default
DERIVE_BUILDER: Final[str] = (
    "#[derive(derive_builder::Builder)]\n"
    "#[builder(setter(into, strip_option), default)]"
)
DERIVE_BUILDER_INTO: Final[str] = "#[builder(setter(into))]"
DERIVE_BUILDER_OPTION: Final[str] = "#[builder(setter(into, strip_option))]"

SQLX_TYPE: Final[str] = "#[derive(sqlx::Type)]"
SQLX_FROM_ROW: Final[str] = "#[derive(sqlx::FromRow)]"

STRUM: Final[str] = (
    "#[derive(strum::EnumString, strum::Display, strum::EnumIter)]\n"
    "#[strum(ascii_case_insensitive)]"
)

# Configuration file locations
PROJECT_CONFIG_NAME: Final[str] = "protoattrs.yaml"
DEFAULT_MANIFEST_NAME: Final[str] = "attributes.yaml"
