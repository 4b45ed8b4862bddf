"""
CRM Prep Configuration
Centralized configuration management
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dotenv import load_dotenv

from ._version import __version__


class PrepConfig:
    """
    Centralized configuration for CRM Prep.
    Loads from .env and provides typed access to all settings.
    """

    def __init__(self, env_file: Optional[Path] = None):
        if env_file is None:
            env_file = Path(__file__).parent.parent / '.env'

        if env_file.exists():
            load_dotenv(env_file)

        self.app_name = "CRM Prep"
        self.app_version = __version__

        # Paths
        self.root_dir = Path(__file__).parent.parent

        # Output directory from .env or default (created lazily on export)
        output_dir_env = os.getenv('OUTPUT_DIR', 'output')
        if Path(output_dir_env).is_absolute():
            self.output_dir = Path(output_dir_env)
        else:
            self.output_dir = self.root_dir / output_dir_env

        # Mapping
        self.mapping_profile = os.getenv('MAPPING_PROFILE', 'keyword')
        self.passthrough_mode = os.getenv('PASSTHROUGH_MODE', '') or None

        # API Keys - AI Providers (for record enhancement)
        self.ai_provider = os.getenv('AI_PROVIDER', 'openai')
        self.openai_api_key = os.getenv('OPENAI_API_KEY', '')
        self.openai_model = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')
        self.anthropic_api_key = os.getenv('ANTHROPIC_API_KEY', '')
        self.anthropic_model = os.getenv('ANTHROPIC_MODEL', 'claude-3-haiku-20240307')

        self.log_level = os.getenv('LOG_LEVEL', 'WARNING')

    @property
    def ai_api_key(self) -> str:
        if self.ai_provider == 'openai':
            return self.openai_api_key
        elif self.ai_provider == 'anthropic':
            return self.anthropic_api_key
        return ''

    @property
    def ai_model(self) -> Optional[str]:
        if self.ai_provider == 'openai':
            return self.openai_model
        elif self.ai_provider == 'anthropic':
            return self.anthropic_model
        return None

    @property
    def has_ai_provider(self) -> bool:
        return bool(self.ai_api_key)

    def get_output_dir(self) -> Path:
        return self.output_dir

    def get_config_status(self) -> Dict[str, Any]:
        return {
            'app': {
                'name': self.app_name,
                'version': self.app_version
            },
            'mapping': {
                'profile': self.mapping_profile,
                'passthrough': self.passthrough_mode or 'profile default',
            },
            'enhancement': {
                'provider': self.ai_provider,
                'model': self.ai_model,
                'configured': self.has_ai_provider
            },
            'output_dir': str(self.output_dir),
        }

    def __repr__(self) -> str:
        status = self.get_config_status()
        return f"PrepConfig({status['mapping']}, {status['enhancement']})"


# Global config instance
_config: Optional[PrepConfig] = None


def get_config() -> PrepConfig:
    global _config
    if _config is None:
        _config = PrepConfig()
    return _config


def reload_config(env_file: Optional[Path] = None) -> PrepConfig:
    global _config
    _config = PrepConfig(env_file)
    return _config
