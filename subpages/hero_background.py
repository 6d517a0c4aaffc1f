# subpages/hero_background.py: decorative animated backdrop for the hero
# -----------------------------------------------------------------------
# Purely presentational. Nothing here reads or writes catalog/selection state.

from __future__ import annotations
from typing import Dict, List, Optional

import numpy as np
from streamlit.components.v1 import html as st_html

BOX = 400          # drawing box in px
DRIFT = 150        # circles wander within +/- DRIFT of the centre


def particle_field(rng: np.random.Generator, n: int = 20) -> List[Dict[str, float]]:
    """Random start/end positions, scales, sizes and durations for ``n`` drifting circles."""
    xy0 = rng.uniform(-DRIFT, DRIFT, size=(n, 2))
    xy1 = rng.uniform(-DRIFT, DRIFT, size=(n, 2))
    s0 = rng.uniform(0.5, 1.0, size=n); s1 = rng.uniform(0.5, 1.0, size=n)
    size = rng.uniform(10, 50, size=n)
    dur = rng.uniform(10, 20, size=n)
    return [
        {"x0": float(xy0[i, 0]), "y0": float(xy0[i, 1]), "x1": float(xy1[i, 0]), "y1": float(xy1[i, 1]),
         "s0": float(s0[i]), "s1": float(s1[i]), "size": float(size[i]), "duration": float(dur[i])}
        for i in range(n)
    ]


def curve_field(rng: np.random.Generator, n: int = 10) -> List[Dict[str, object]]:
    """Random quadratic Bezier paths (SVG ``d`` strings) that draw and undraw themselves."""
    pts = rng.uniform(0, BOX, size=(n, 6))
    dur = rng.uniform(15, 25, size=n)
    return [
        {"d": "M{:.1f},{:.1f} Q{:.1f},{:.1f} {:.1f},{:.1f}".format(*pts[i]), "duration": float(dur[i])}
        for i in range(n)
    ]


def background_html(particles: List[Dict[str, float]], curves: List[Dict[str, object]],
                    height: int = BOX, color: str = "56,189,248") -> str:
    css, dots = [], []
    for i, p in enumerate(particles):
        css.append(
            f"@keyframes drift{i} {{"
            f" 0% {{transform: translate({p['x0']:.1f}px,{p['y0']:.1f}px) scale({p['s0']:.2f}); opacity:.3}}"
            f" 50% {{opacity:.6}}"
            f" 100% {{transform: translate({p['x1']:.1f}px,{p['y1']:.1f}px) scale({p['s1']:.2f}); opacity:.3}} }}"
        )
        dots.append(
            f"<div class='dot' style='width:{p['size']:.0f}px;height:{p['size']:.0f}px;"
            f"animation: drift{i} {p['duration']:.1f}s linear infinite alternate;'></div>"
        )
    paths = "".join(
        f"<path d='{c['d']}' pathLength='1' style='animation: trace {c['duration']:.1f}s linear infinite;'/>"
        for c in curves
    )
    return f"""
<style>
.bg {{ position:relative; width:100%; height:{height}px; overflow:hidden; border-radius:12px;
       background: linear-gradient(90deg, rgba({color},.05), rgba(148,163,184,.05)); }}
.bg .dot {{ position:absolute; left:50%; top:50%; border-radius:50%; background: rgba({color},.2); }}
.bg svg {{ position:absolute; inset:0; width:100%; height:100%; }}
.bg path {{ stroke: rgba({color},.2); stroke-width:1; fill:none; stroke-dasharray:1; stroke-dashoffset:1; }}
@keyframes trace {{ 0% {{stroke-dashoffset:1; opacity:.2}} 50% {{stroke-dashoffset:0; opacity:.4}} 100% {{stroke-dashoffset:1; opacity:.2}} }}
{chr(10).join(css)}
</style>
<div class="bg">{''.join(dots)}<svg viewBox="0 0 {BOX} {BOX}" preserveAspectRatio="none">{paths}</svg></div>
"""


def render_background(seed: Optional[int] = None, height: int = BOX):
    rng = np.random.default_rng(seed)
    st_html(background_html(particle_field(rng), curve_field(rng), height=height), height=height + 10)
