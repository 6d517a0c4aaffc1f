# app.py: Data analyst portfolio (single scroll) + project detail view
# ---------------------------------------------------------------------
#  • Projects gallery with category tabs, backed by portfolio.CatalogBrowser
#  • Detail view (overview / methodology / findings / conclusion) replaces the home view
#  • Catalog comes from assets/projects.json (or $PORTFOLIO_CATALOG), else the built-in set
# ---------------------------------------------------------------------

from __future__ import annotations
import logging
import math
import os
from html import escape
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import streamlit as st
import matplotlib.pyplot as plt
from streamlit.components.v1 import html as st_html

from portfolio import CatalogBrowser
from portfolio.loader import load_browser
from portfolio.views import card_badges, filter_tabs
from subpages.hero_background import render_background
from subpages.project_detail import image_source, project_detail_page, rerun

logging.basicConfig(
    level=os.environ.get("PORTFOLIO_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# -----------------------------
# Page config + CSS
# -----------------------------
st.set_page_config(
    page_title="Soubhagya Swain — Data Analyst Portfolio",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
/* --- Projects grid: scoped to the gallery cards --- */
.portfolio-grid .portfolio-card {
  border: 1px solid rgba(0,0,0,.08);
  border-radius: 12px;
  padding: 10px;
  box-shadow: 0 2px 6px rgba(0,0,0,0.06);
  background: rgba(255,255,255,0.04);
}

.hero {
  font-weight: 800;
  line-height: 1.1;
  margin: 0 0 6px;
  letter-spacing: .2px;
  font-size: clamp(28px, 3.6vw, 48px);
}

.hero-title { font-size: clamp(18px, 1.6vw, 24px); opacity: .75; margin-bottom: 10px; }

.hero-sub {
  font-size: clamp(15px, 1.2vw, 18px);
  line-height: 1.6;
  opacity: .9;
  max-width: 62ch;
}

@media (max-width: 700px) {
  .hero { font-size: 26px; }
  .hero-sub { font-size: 16px; }
}

.section-title { font-weight: 700; font-size: 1.6rem; margin: 18px 0 10px; }

/* Readable body text for descriptions; ignore clamps from ancestors */
.blurb {
  display: block !important;
  white-space: normal !important;
  overflow: visible !important;
  font-size: 0.98rem !important;
  line-height: 1.55 !important;
  opacity: .95;
}

/* Card title + description: two lines max so the buttons line up */
.portfolio-grid .portfolio-title {
  margin: 10px 2px 4px;
  font-weight: 700;
  font-size: 1.05rem;
  line-height: 1.2;
  min-height: 2.6em;
  display: -webkit-box;
  -webkit-line-clamp: 2;
  -webkit-box-orient: vertical;
  overflow: hidden;
}
.portfolio-grid .portfolio-desc {
  opacity: .8;
  font-size: .92rem;
  min-height: 3em;
  display: -webkit-box;
  -webkit-line-clamp: 2;
  -webkit-box-orient: vertical;
  overflow: hidden;
}

.badge {
  display: inline-block;
  padding: 2px 10px;
  margin: 0 6px 6px 0;
  border: 1px solid rgba(148,163,184,.6);
  border-radius: 999px;
  font-size: .78rem;
}
.badge-cat { background: rgba(56,189,248,.18); border-color: transparent; }
</style>
""", unsafe_allow_html=True)

# -----------------------------
# Paths, flags & data
# -----------------------------
BASE = Path(__file__).resolve().parent
ASSETS = BASE / "assets"
CATALOG_PATH = Path(os.environ.get("PORTFOLIO_CATALOG", ASSETS / "projects.json"))
RESUME_PDF = ASSETS / "resume.pdf"

# --- Feature flags ---
SHOW_BACKGROUND = True         # decorative animated hero backdrop
SHOW_REPORT_PREVIEW = True     # inline page preview for local PDF reports
CARD_TOOL_BADGES = 2           # tools shown on a gallery card before "+N"

NAME = "Soubhagya Swain"
TITLE = "Data Analyst & Visualization Expert"
BIO = ("I Turn Complex Data Into Clear, Actionable Insights Through Statistical Analysis, "
       "Compelling Visualizations, And Predictive Modeling — With Just Enough Magic To Make "
       "You Wonder If I Time-Traveled To Get The Answers.")

SKILLS: List[Tuple[str, int, str, str]] = [
    ("Python", 90, "Programming", "Advanced data analysis, pandas, numpy, scikit-learn"),
    ("SQL", 85, "Programming", "Complex queries, database design, optimization"),
    ("R", 75, "Programming", "Statistical analysis, ggplot2, tidyverse"),
    ("Tableau", 95, "Visualization", "Dashboard creation, interactive visualizations"),
    ("Power BI", 80, "Visualization", "Business intelligence, DAX, data modeling"),
    ("Excel", 90, "Tools", "Advanced formulas, pivot tables, VBA"),
    ("Machine Learning", 70, "Skills", "Regression, classification, clustering"),
    ("Statistical Analysis", 85, "Skills", "Hypothesis testing, regression analysis, ANOVA"),
]

EDUCATION: List[Dict[str, str]] = [
    {"degree": "Master of Science in Data Analytics", "institution": "University of Data Science",
     "year": "2018-2020",
     "description": "Specialized in statistical modeling and data visualization techniques. Graduated with honors."},
    {"degree": "Bachelor of Science in Computer Science", "institution": "Tech University",
     "year": "2014-2018", "description": "Focus on algorithms and database management systems."},
]

SECTION_IDS = {"hero": "sec-hero", "projects": "sec-projects", "skills": "sec-skills",
               "education": "sec-education", "contact": "sec-contact"}

# -----------------------------
# Catalog + session state
# -----------------------------
BROWSER_KEY = "catalog_browser"


def get_browser() -> CatalogBrowser:
    if BROWSER_KEY not in st.session_state:
        browser, error = load_browser(CATALOG_PATH)
        shared = st.query_params.get("project")
        if shared:
            browser.open(shared)
        st.session_state[BROWSER_KEY] = browser
        st.session_state["catalog_error"] = error
    return st.session_state[BROWSER_KEY]


# -----------------------------
# Helpers (scroll)
# -----------------------------
def set_pending_jump(anchor_id: str):
    st.session_state["pending_jump"] = anchor_id


def consume_pending_jump() -> Optional[str]:
    return st.session_state.pop("pending_jump", None)


def js_scroll_to_anchor(anchor_id: str):
    st_html(
        f"""
<script>
(function(){{
  const root = window.parent.document;
  const targetId = "{anchor_id}";
  function scrollNow() {{
    const el = root.getElementById(targetId);
    if (el) {{ el.scrollIntoView({{behavior:'smooth', block:'start'}}); return true; }}
    return false;
  }}
  if (!scrollNow()) {{
    const obs = new MutationObserver(() => {{ if (scrollNow()) obs.disconnect(); }});
    obs.observe(root, {{childList:true, subtree:true}});
    setTimeout(() => {{ scrollNow(); }}, 400);
  }}
}})();
</script>
""",
        height=0,
    )


def disable_scroll_restoration():
    st_html("""<script>try { window.parent.history.scrollRestoration = 'manual'; } catch(e) {}</script>""", height=0)


def enforce_detail_top():
    st_html(
        """
<script>
(function(){
  const rootWin = window.parent;
  function toTop(){
    try { rootWin.scrollTo({top:0, left:0, behavior:'auto'}); } catch(e){}
    try {
      const scroller = rootWin.document.querySelector('section.main div.block-container');
      if (scroller) scroller.scrollTo({top:0, left:0, behavior:'auto'});
    } catch(e){}
  }
  toTop();
  [60, 200, 500].forEach(t => setTimeout(toTop, t));
})();
</script>
""",
        height=0,
    )

# -----------------------------
# Viz helpers (radar)
# -----------------------------
def is_dark_theme() -> bool:
    base = (st.get_option("theme.base") or "light").lower()
    return base == "dark"


def radar_chart(title: str, scores: Dict[str, float], size_px: int = 520, dark: bool | None = None, title_y: float = 1.2):
    if dark is None: dark = is_dark_theme()
    labels = list(scores.keys()); values = list(scores.values())
    angles = np.linspace(0, 2*math.pi, len(labels), endpoint=False).tolist()
    angles += angles[:1]; v = values + values[:1]
    dpi = 200
    fig = plt.figure(figsize=(size_px/dpi, size_px/dpi), dpi=dpi); ax = plt.subplot(111, polar=True)
    fig.patch.set_alpha(0.0); ax.set_facecolor("none"); ax.set_theta_offset(math.pi/2); ax.set_theta_direction(-1)
    label_color = "#ffffff" if dark else "#1f2937"; tick_color = "#e5e7eb" if dark else "#6b7280"; grid_color = "#9ca3af"
    plt.xticks(angles[:-1], labels, fontsize=8, color=label_color)
    ax.tick_params(pad=8, colors=tick_color); ax.set_ylim(0, 100); ax.set_yticks([20,40,60,80,100])
    ax.set_yticklabels([20,40,60,80,100], fontsize=6, color=tick_color)
    ax.yaxis.grid(True, linestyle="dotted", alpha=0.25, color=grid_color)
    ax.xaxis.grid(True, linestyle="dotted", alpha=0.25, color=grid_color)
    line_color = (0.3,0.9,1.0,0.95) if dark else (0.1,0.4,0.7,0.95)
    for lw, a in [(10,0.06),(8,0.08),(6,0.10),(4,0.12)]: ax.plot(angles, v, linewidth=lw, color=(line_color[0], line_color[1], line_color[2], a))
    ax.plot(angles, v, linewidth=2, color=line_color); ax.fill(angles, v, alpha=0.10, color=line_color)
    ax.set_title(title, y=title_y, fontsize=11, color=line_color)
    st.pyplot(fig, use_container_width=False, transparent=True, bbox_inches="tight")
    plt.close(fig)

# -----------------------------
# Sidebar
# -----------------------------
browser = get_browser()

if not browser.selection.is_detail_open:
    st.sidebar.title("Navigate")
    for label, key in [("Home", "hero"), ("Projects", "projects"), ("Skills", "skills"),
                       ("Education", "education"), ("Contact", "contact")]:
        if st.sidebar.button(label, key=f"nav_{key}", use_container_width=True):
            set_pending_jump(SECTION_IDS[key]); rerun()
    st.sidebar.markdown("---")
    st.sidebar.subheader("Projects")
    for p in browser.visible_projects():
        if st.sidebar.button(f"• {p.title}", key=f"side_{p.id}"):
            browser.open(p.id); rerun()
else:
    st.sidebar.title("Projects")
    if st.sidebar.button("← Back to Home", use_container_width=True):
        browser.close(); set_pending_jump(SECTION_IDS["projects"]); rerun()
    st.sidebar.markdown("---")
    for p in browser.visible_projects():
        if st.sidebar.button(p.title, key=f"goto_{p.id}"):
            browser.open(p.id); rerun()

# -----------------------------
# HOME (single page)
# -----------------------------
def render_projects():
    st.markdown(f"<div id='{SECTION_IDS['projects']}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Projects</div>', unsafe_allow_html=True)
    st.caption("Explore My Projects in Data Analysis — From Dashboards and EDA to Statistical Insights and Predictive Models.")

    if st.session_state.get("catalog_error"):
        st.error(f"Could not load {CATALOG_PATH.name}; showing the built-in projects. ({st.session_state['catalog_error']})")

    tabs = filter_tabs(browser.store)
    values = [value for value, _ in tabs]
    labels = dict(tabs)
    choice = st.radio("Filter projects", values, index=values.index(browser.active_filter),
                      format_func=lambda v: labels[v], horizontal=True, label_visibility="collapsed",
                      key="project_filter")
    if choice != browser.active_filter and not browser.set_filter(choice):
        st.warning(f"Unknown filter: {choice}")

    visible = browser.visible_projects()
    if not visible:
        st.info("No projects in this category yet.")
        return

    st.markdown('<div class="portfolio-grid">', unsafe_allow_html=True)
    cols = st.columns(3)
    for i, p in enumerate(visible):
        with cols[i % 3]:
            st.markdown('<div class="portfolio-card">', unsafe_allow_html=True)
            st.image(image_source(p.image, p.id, BASE, 600, 400), use_container_width=True)
            st.markdown(f'<div class="portfolio-title">{escape(p.title)}</div>', unsafe_allow_html=True)
            st.markdown(f'<div class="portfolio-desc">{escape(p.description)}</div>', unsafe_allow_html=True)
            badges = card_badges(p, CARD_TOOL_BADGES)
            st.markdown(f"<span class='badge badge-cat'>{badges[0]}</span>"
                        + "".join(f"<span class='badge'>{escape(b)}</span>" for b in badges[1:]),
                        unsafe_allow_html=True)
            if st.button("View project", key=f"open_{p.id}", use_container_width=True):
                browser.open(p.id); rerun()
            st.markdown('</div>', unsafe_allow_html=True)
    st.markdown('</div>', unsafe_allow_html=True)


def render_skills():
    st.markdown(f"<div id='{SECTION_IDS['skills']}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Skills / Tools</div>', unsafe_allow_html=True)
    c1, c2 = st.columns([1, 1.2])
    with c1:
        radar_chart("Proficiency", {name: level for name, level, _, _ in SKILLS})
    with c2:
        for name, level, category, description in SKILLS:
            st.markdown(f"**{name}** · <span class='badge'>{category}</span>", unsafe_allow_html=True)
            st.progress(level / 100, text=f"{level}% · {description}")


def render_home():
    disable_scroll_restoration()
    jump_id = consume_pending_jump()
    if jump_id: js_scroll_to_anchor(jump_id)

    st.markdown(f"<div id='{SECTION_IDS['hero']}' class='section'></div>", unsafe_allow_html=True)
    col_left, col_right = st.columns([1.2, 1.0], vertical_alignment="center")
    with col_left:
        st.markdown(f'<div class="hero">{NAME}</div>', unsafe_allow_html=True)
        st.markdown(f'<div class="hero-title">{TITLE}</div>', unsafe_allow_html=True)
        st.markdown(f'<div class="hero-sub">{BIO}</div>', unsafe_allow_html=True)
        if st.button("View Projects ↓"):
            set_pending_jump(SECTION_IDS["projects"]); rerun()
    with col_right:
        if SHOW_BACKGROUND:
            render_background()

    st.markdown("---")
    render_projects()

    st.markdown("---")
    render_skills()

    st.markdown("---")
    st.markdown(f"<div id='{SECTION_IDS['education']}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Education</div>', unsafe_allow_html=True)
    for edu in EDUCATION:
        st.markdown(f"**{edu['degree']}** · {edu['institution']} · _{edu['year']}_")
        if edu.get("description"): st.caption(edu["description"])

    st.markdown("---")
    st.markdown(f"<div id='{SECTION_IDS['contact']}' class='section'></div>", unsafe_allow_html=True)
    st.markdown('<div class="section-title">Download / Contact</div>', unsafe_allow_html=True)
    cL, cR = st.columns([1, 1])
    with cL:
        st.subheader("Downloads")
        if RESUME_PDF.exists():
            st.download_button("⬇️  Resume", data=RESUME_PDF.read_bytes(), file_name=RESUME_PDF.name,
                               use_container_width=True)
        else: st.error(f"Missing {RESUME_PDF.relative_to(BASE)}")
    with cR:
        st.subheader("Contact")
        st.write("**Email:** contact@example.com")
        st.write("**LinkedIn:** [linkedin.com](https://linkedin.com)")
        st.write("**GitHub:** [github.com](https://github.com)")

# -----------------------------
# Dispatch
# -----------------------------
if browser.selection.is_detail_open:
    disable_scroll_restoration()
    enforce_detail_top()
    project_detail_page(browser, BASE, show_preview=SHOW_REPORT_PREVIEW)
else:
    render_home()
