"""Shared test fixtures — realistic secret maps and dotenv files."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Dict

import pytest

JWT_HEADER = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"

ANON_KEY = (
    JWT_HEADER
    + ".eyJpc3MiOiJzdXBhYmFzZSIsInJlZiI6Im5xd2Jsb3JwZ3VodnFhIiwicm9sZSI6ImFub24iLCJpYXQiOjE3MDAwMDAwMDB9"
    + ".Q8vN2xR7tLp4WmZ1hJ6sKd9FbC3gYe0uTa5XoIqVnMw"
)

SERVICE_ROLE_KEY = (
    JWT_HEADER
    + ".eyJpc3MiOiJzdXBhYmFzZSIsInJlZiI6Im5xd2Jsb3JwZ3VodnFhIiwicm9sZSI6InNlcnZpY2Vfcm9sZSIsImlhdCI6MTcwMDAwMDAwMH0"
    + ".Zr4Hq1Wn8Jc2Vb6Lx0Pd5Gf9Ts3Ym7Ka1Ue4Io8Nh2B"
)

VALID_SECRETS: Dict[str, str] = {
    "EXPO_PUBLIC_SUPABASE_URL": "https://nqwblorpguhvqa.supabase.co",
    "EXPO_PUBLIC_SUPABASE_ANON_KEY": ANON_KEY,
    "SUPABASE_SERVICE_ROLE_KEY": SERVICE_ROLE_KEY,
    "EXPO_PUBLIC_DEEPSEEK_API_KEY": "sk-9fJ2kQ7xLm4Rt8Vb1Nc6Hp3Wz5Ys0Ad",
    "JWT_SECRET": "Hq7Zp2Lw9Xv4Nc8Rb1Tm6Ks3Fy5Gd0Ju7Pe2Aw9Qx4Vn8Mc1",
    "ENCRYPTION_KEY": "aB3dE5fG7hJ9kL1mN2pQ4rS6tU8vW0xY2zC4eF6g",
}


@pytest.fixture
def valid_secrets() -> Dict[str, str]:
    """A complete, well-formed secret map (fresh copy per test)."""
    return dict(VALID_SECRETS)


def write_env_file(path: Path, secrets: Dict[str, str]) -> Path:
    path.write_text("".join(f"{k}={v}\n" for k, v in secrets.items()), encoding="utf-8")
    return path


@pytest.fixture
def valid_env_file(tmp_path: Path, valid_secrets: Dict[str, str]) -> Path:
    """A dotenv file holding the valid secret map."""
    return write_env_file(tmp_path / ".env", valid_secrets)


@pytest.fixture
def sample_dotenv(tmp_path: Path) -> Path:
    """A dotenv file with comments, quoting, and a bare key."""
    path = tmp_path / "sample.env"
    path.write_text(textwrap.dedent("""\
        # deployment settings
        NODE_ENV=production
        JWT_SECRET="Hq7Zp2Lw9Xv4Nc8Rb1Tm6Ks3Fy5Gd0Ju7Pe2Aw9Qx4Vn8Mc1"
        export DEEPSEEK_API_URL=https://api.deepseek.com/v1/chat/completions
        EMPTY_VALUE=
        BARE_KEY
    """), encoding="utf-8")
    return path
