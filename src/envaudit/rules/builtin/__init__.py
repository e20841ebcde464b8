"""Built-in rules — aggregate all categories in registry order."""

from envaudit.rules.builtin.ai import ALL_AI_RULES
from envaudit.rules.builtin.database import ALL_DATABASE_RULES
from envaudit.rules.builtin.keys import ALL_KEY_RULES
from envaudit.rules.builtin.supabase import ALL_SUPABASE_RULES
from envaudit.rules.builtin.tooling import ALL_TOOLING_RULES
from envaudit.rules.models import SecretRule

ALL_BUILTIN_RULES: list[SecretRule] = [
    *ALL_SUPABASE_RULES,
    *ALL_AI_RULES,
    *ALL_KEY_RULES,
    *ALL_DATABASE_RULES,
    *ALL_TOOLING_RULES,
]

__all__ = ["ALL_BUILTIN_RULES"]
