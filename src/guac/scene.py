from __future__ import annotations

import logging
import os
import subprocess
from typing import List, Optional

from manim import DOWN, UP, FadeIn, MathTex, Scene, Text, Transform, config

from guac.cast import to_f64
from guac.config import Config, load_config
from guac.display import display
from guac.errors import CastError, GuacError, LatexError
from guac.expr import Expr
from guac.latex import display_latex
from guac.parser import parse

logger = logging.getLogger(__name__)

EXPR_ENV = "GUAC_EXPR"
DEFAULT_EXPR = "2x + 3x + sin(pi/6)"


def approximate(expr: Expr, cfg: Config) -> Optional[str]:
    try:
        value = to_f64(expr)
    except CastError:
        return None
    return f"{value:.{cfg.precision}g}"


def describe(text: str, cfg: Config) -> List[str]:
    """The lines ``main`` prints for ``text``: canonical form, LaTeX, and an approximation when one exists."""
    expr = parse(text, cfg)
    lines = [f"Result: {display(expr, cfg.radix)}", f"LaTeX: {display_latex(expr, cfg.radix)}"]
    approx = approximate(expr, cfg)
    if approx is not None:
        lines.append(f"Approx: {approx}")
    return lines


class SimplifyScene(Scene):
    def construct(self) -> None:
        text = os.environ.get(EXPR_ENV, DEFAULT_EXPR)
        cfg = load_config()
        anim_run_time = 1.2
        final_wait = 2.0

        title = Text("Input", font="Noto Sans", weight="BOLD")
        title.scale(0.45).to_edge(UP, buff=0.1)
        label = Text(text, font="Noto Sans")
        self._fit_to_frame(label)
        self.play(FadeIn(title), FadeIn(label), run_time=anim_run_time)

        try:
            expr = parse(text, cfg)
            result = MathTex(display_latex(expr, cfg.radix))
        except (GuacError, LatexError) as exc:
            error = Text(f"Error: {exc}", font="Noto Sans")
            error.scale(0.6).next_to(label, DOWN, buff=0.6)
            self.play(FadeIn(error), run_time=anim_run_time)
            self.wait(final_wait)
            return

        new_title = Text("Simplified", font="Noto Sans", weight="BOLD")
        new_title.scale(0.45).to_edge(UP, buff=0.1)
        self._fit_to_frame(result)
        self.play(Transform(title, new_title), Transform(label, result), run_time=anim_run_time)

        approx = approximate(expr, cfg)
        if approx is not None:
            note = MathTex(r"\approx " + approx)
            note.scale(0.6).next_to(label, DOWN, buff=0.6)
            self.play(FadeIn(note), run_time=anim_run_time)
        self.wait(final_wait)

    def _fit_to_frame(self, mob) -> None:
        max_width = config.frame_width * 0.9
        max_height = config.frame_height * 0.8
        if mob.width > max_width:
            mob.scale(max_width / mob.width)
        if mob.height > max_height:
            mob.scale(max_height / mob.height)
        mob.move_to([0, 0, 0])


def main() -> None:
    logging.basicConfig(level=os.getenv("GUAC_LOG_LEVEL", "WARNING"))
    text = input("Enter expression: ").strip() or DEFAULT_EXPR
    try:
        cfg = load_config()
        lines = describe(text, cfg)
    except (GuacError, LatexError) as exc:
        print(f"Error: {exc}")
        return
    for line in lines:
        print(line)

    env = os.environ.copy()
    env[EXPR_ENV] = text
    cmd: List[str] = ["manim", "-pqh", os.path.abspath(__file__), "SimplifyScene"]
    logger.debug("running %s", " ".join(cmd))
    subprocess.run(cmd, check=False, env=env)


if __name__ == "__main__":
    main()
