"""Starter .envaudit.toml template."""

DEFAULT_TOML = """\
# envaudit configuration
version = "1.0"

[source]
# env_file = ".env"           # dotenv file merged over the process environment
include_environ = true

[rules]
# enable = ["JWT_SECRET", "ENCRYPTION_KEY"]   # empty = all enabled
# disable = ["GCP_SA_KEY"]
custom_dir = ".envaudit-rules"

[output]
format = "text"               # text | terminal | json
show_summary = true

[threshold]
min_score = 0                 # fail when the security score drops below this
"""
