from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from enumconf.platform_dirs import default_system_dirs


class EnumeratorSettings(BaseModel):
    app_name: str
    config_name: str = ""
    config_name_in_path: str = ""
    include_missing: bool = False
    system_dirs: list[str] = Field(default_factory=default_system_dirs)

    @model_validator(mode="after")
    def _default_file_names(self) -> EnumeratorSettings:
        if not self.config_name:
            self.config_name = f"{self.app_name}.conf"
        if not self.config_name_in_path:
            self.config_name_in_path = f".{self.app_name}"
        return self
