"""Configuration for iconfetcher"""

from pathlib import Path

from dynaconf import Dynaconf, Validator

# Validators for iconfetcher settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"], must_exist=True),
    Validator(
        "logging.level",
        is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        must_exist=True,
    ),
    Validator("logging.can_propagate", is_type_of=bool, must_exist=True),
    # A hung candidate must not stall resolution, so the request timeout is mandatory
    # and bounded.
    Validator("http.request_timeout_sec", is_type_of=float, gt=0, lte=60.0, must_exist=True),
    Validator("http.connect_timeout_sec", is_type_of=float, gt=0, lte=60.0, must_exist=True),
    Validator("http.max_connections", is_type_of=int, gte=1, must_exist=True),
    Validator("http.follow_redirects", is_type_of=bool, must_exist=True),
    Validator("fetcher.user_agent", is_type_of=str, must_exist=True),
    # 0 means unbounded fan-out.
    Validator("fetcher.max_concurrent_fetches", is_type_of=int, gte=0, must_exist=True),
]

# `root_path` = The package directory, so settings load regardless of the working directory.
# `envvar_prefix` = Export envvars with `export ICONFETCHER_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing`.
# Environment tables override single keys of `[default.*]`, not whole tables.
# `env_switcher` = Switch environments by `export ICONFETCHER_ENV=production`.
# `validators` = Define validators for iconfetcher settings.

settings = Dynaconf(
    root_path=str(Path(__file__).parent),
    envvar_prefix="ICONFETCHER",
    settings_files=[
        "configs/default.toml",
        "configs/development.toml",
        "configs/testing.toml",
    ],
    environments=True,
    merge_enabled=True,
    env_switcher="ICONFETCHER_ENV",
    validators=_validators,
)
