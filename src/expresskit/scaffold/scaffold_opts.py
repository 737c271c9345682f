"""Options dataclass for the scaffold command."""

from dataclasses import dataclass

from expresskit.install.installer import DEFAULT_TIMEOUT
from expresskit.scaffold.project_paths import DEFAULT_TARGET


@dataclass
class ScaffoldOpts:
    """All options for the scaffold command."""

    target: str = DEFAULT_TARGET
    package_manager: str | None = None
    timeout: int = DEFAULT_TIMEOUT
    skip_install: bool = False
    git_init: bool = False
    port: int = 4000
    mongo_uri: str = "mongodb://localhost:27017/"
    jwt_secret: str = "your_jwt_secret"

    @property
    def template_variables(self):
        return {
            "port": self.port,
            "mongo_uri": self.mongo_uri,
            "jwt_secret": self.jwt_secret,
        }
