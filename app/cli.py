"""
Punto de entrada CLI.
Uso: python -m app.cli predict [strengthHome] [strengthAway] [maxGoals]
     python -m app.cli fixtures <league_id>
"""
from __future__ import annotations

import json
import logging
import sys

from config.settings import settings
from core.errors import InvalidInput
from core.poisson import predict
from data.providers.errors import ProviderError
from data.providers.fixtures import get_fixtures

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _usage() -> None:
    print("Uso: python -m app.cli <comando>")
    print("  predict [strengthHome] [strengthAway] [maxGoals]  - Probabilidades Poisson")
    print("  fixtures <league_id>                              - Próximos partidos de una liga")


def cmd_predict(args: list[str]) -> int:
    strength_home = args[0] if len(args) > 0 else 1.0
    strength_away = args[1] if len(args) > 1 else 1.0
    max_goals = args[2] if len(args) > 2 else settings.max_goals
    try:
        result = predict(strength_home, strength_away, max_goals, **settings.model_params())
    except InvalidInput as e:
        print(f"Error: {e}")
        return 1
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


def cmd_fixtures(args: list[str]) -> int:
    if not args:
        print("Error: league required")
        return 1
    try:
        league_id = int(args[0])
    except ValueError:
        print("Error: league must be a numeric id")
        return 1
    try:
        fixtures = get_fixtures(league_id)
    except ProviderError as e:
        print(f"Error: {e}")
        return 1
    print(json.dumps(fixtures, ensure_ascii=False, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        _usage()
        return 1
    cmd, rest = argv[0].lower(), argv[1:]
    if cmd == "predict":
        return cmd_predict(rest)
    if cmd == "fixtures":
        return cmd_fixtures(rest)
    print(f"Comando desconocido: {cmd}")
    _usage()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
