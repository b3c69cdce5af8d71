import os
import tempfile
from typing import Optional
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Directory name the demo layout is provisioned under
DEMO_ROOT_NAME = "ROOT"

class Settings(BaseSettings):
    """Server settings, overridable through FILETREE_* environment variables"""
    model_config = SettingsConfigDict(env_prefix="FILETREE_")

    root: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    # An empty value disables the file handler
    log_file: Optional[str] = "filetree.log"
    provision_demo: Optional[bool] = None

    @model_validator(mode="after")
    def fill_defaults(self):
        # The demo layout is only laid down in the default location unless asked for
        if self.provision_demo is None:
            self.provision_demo = self.root is None
        if not self.root:
            self.root = os.path.join(tempfile.gettempdir(), DEMO_ROOT_NAME)
        if not self.log_file:
            self.log_file = None
        return self

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()
