from __future__ import annotations
import argparse, json, logging, sys, time
from typing import Any, Dict, List

from .brain import GlyphAI
from .config import ENV_PREFIX, load_tuning
from .game_models import GameState, Player
from .game_setup import new_game
from .personality import Difficulty, get_available_personalities, list_personalities, print_personality_summary
from .selfplay import DEFAULT_MAX_TURNS, play_game
from .tuning import AITuning

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="python -m glyph_ai.cli",
        description="Glyphtender AI CLI"
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd")

    # decide
    dc = sub.add_parser("decide", help="Ask one AI seat for a move and emit a decision report")
    _add_common_args(dc)
    dc.add_argument("--state", type=str, default=None, help="Game state JSON (default: fresh game from --seed)")
    dc.add_argument("--player", type=str, default=None, help="Seat to decide for (default: player to move)")
    dc.add_argument("--personality", type=str, default="balanced")
    dc.add_argument("--report", type=str, default=None, help="Path to save report (.json or .md)")
    dc.add_argument("--print-md", action="store_true", help="Print Markdown report to stdout")

    # bench
    bn = sub.add_parser("bench", help="Play AI-vs-AI games over several seeds")
    _add_common_args(bn)
    bn.add_argument("--games", type=int, default=4, help="Number of games (seeds seed..seed+games-1)")
    bn.add_argument("--yellow", type=str, default="balanced", help="Yellow personality")
    bn.add_argument("--blue", type=str, default="balanced", help="Blue personality")
    bn.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS)
    bn.add_argument("--draft", action="store_true", help="Use the draft opening")
    bn.add_argument("--out", type=str, default=None, help="Save benchmark JSON")

    # personalities
    ps = sub.add_parser("personalities", help="List presets or show one")
    ps.add_argument("--show", type=str, default=None, help="Preset name to describe")

    args = p.parse_args(argv)
    if getattr(args, "cmd", None) is None:
        p.print_help()
        sys.exit(2)
    return args


def _add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--difficulty", type=str, default="first_class",
                    help="apprentice | first_class | archmage")
    ap.add_argument("--size", type=str, default="medium", help="Board size: small | medium | large")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--config", type=str, action="append", default=[], help="YAML/JSON config files (merged)")
    ap.add_argument("--env-prefix", type=str, default=ENV_PREFIX, help="Env prefix for overrides")


def _tuning(args: argparse.Namespace) -> AITuning:
    return load_tuning(getattr(args, "config", []), getattr(args, "env_prefix", ENV_PREFIX))


def _load_state(args: argparse.Namespace) -> GameState:
    if args.state:
        with open(args.state, "r", encoding="utf-8") as f:
            return GameState.from_dict(json.load(f))
    return new_game(seed=args.seed, size=args.size)


def _decide(args: argparse.Namespace) -> Dict[str, Any]:
    state = _load_state(args)
    player = Player.parse(args.player) if args.player else state.current_player
    seat = GlyphAI(
        player,
        args.personality,
        difficulty=Difficulty.parse(args.difficulty),
        seed=args.seed,
        tuning=_tuning(args),
    )
    move = seat.choose_move(state)
    return {"move": move, "report": seat.last_decision}


def _bench(args: argparse.Namespace) -> Dict[str, Any]:
    tuning = _tuning(args)
    difficulty = Difficulty.parse(args.difficulty)
    wins: Dict[str, int] = {"yellow": 0, "blue": 0, "draw": 0}
    scores: Dict[str, List[int]] = {"yellow": [], "blue": []}
    turns: List[int] = []
    reasons: Dict[str, int] = {}
    t0 = time.perf_counter()

    for g in range(int(args.games)):
        seed = args.seed + g
        seats = {
            Player.YELLOW: GlyphAI(Player.YELLOW, args.yellow, difficulty=difficulty, seed=seed * 2, tuning=tuning),
            Player.BLUE: GlyphAI(Player.BLUE, args.blue, difficulty=difficulty, seed=seed * 2 + 1, tuning=tuning),
        }
        state = new_game(seed=seed, size=args.size, draft=args.draft)
        result = play_game(seats, state, max_turns=args.max_turns)
        wins[result.winner or "draw"] += 1
        for k in scores:
            scores[k].append(result.scores[k])
        turns.append(result.turns)
        reasons[result.end_reason] = reasons.get(result.end_reason, 0) + 1

    elapsed = max(1e-9, time.perf_counter() - t0)
    return {
        "games": int(args.games),
        "yellow": args.yellow,
        "blue": args.blue,
        "wins": wins,
        "mean_score": {k: (sum(v) / len(v) if v else 0.0) for k, v in scores.items()},
        "mean_turns": sum(turns) / len(turns) if turns else 0.0,
        "end_reasons": reasons,
        "turns_per_sec": sum(turns) / elapsed,
    }


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "decide":
        res = _decide(args)
        report = res["report"]
        if args.report:
            if args.report.endswith(".json"):
                with open(args.report, "w", encoding="utf-8") as f:
                    f.write(report.to_json())
            elif args.report.endswith(".md"):
                with open(args.report, "w", encoding="utf-8") as f:
                    f.write(report.to_markdown())
            else:
                print("Report path must end with .json or .md", file=sys.stderr)
        if args.print_md:
            print(report.to_markdown())
        else:
            move = res["move"]
            print(move if move is not None else "pass (no legal moves)")
        return 0

    if args.cmd == "bench":
        out = _bench(args)
        if args.out:
            with open(args.out, "w", encoding="utf-8") as f:
                json.dump(out, f, indent=2)
        print(json.dumps(out, indent=2))
        return 0

    if args.cmd == "personalities":
        if args.show:
            if args.show.lower() not in get_available_personalities():
                print(f"Unknown personality '{args.show}'", file=sys.stderr)
                return 1
            print_personality_summary(args.show)
        else:
            list_personalities()
        return 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
