# subpages/project_detail.py: detail view for the project that is currently open
# -------------------------------------------------------------------------------

from __future__ import annotations
import logging
from html import escape
from pathlib import Path
from typing import Optional

import streamlit as st

from portfolio import CatalogBrowser, Project, Section
from portfolio.views import detail_actions, section_content

logger = logging.getLogger(__name__)


def rerun():
    # Streamlit changed this API; support both
    try:
        st.rerun()
    except AttributeError:
        st.experimental_rerun()


def is_url(ref: Optional[str]) -> bool:
    return bool(ref) and ref.startswith(("http://", "https://"))


def site_path(ref: str, base: Path) -> Optional[Path]:
    """``ref`` as a file under ``base`` (leading "/" means the site root); None if it escapes ``base``."""
    base = base.resolve()
    p = (base / ref.lstrip("/")).resolve()
    if not p.is_relative_to(base):
        logger.warning("Ignoring asset path outside %s: %r", base, ref)
        return None
    return p


def image_source(image: str, slug: str, base: Path, w: int = 900, h: int = 540) -> str:
    """URL as-is, existing local file as a path, otherwise a seeded placeholder."""
    if is_url(image):
        return image
    local = site_path(image, base) if image else None
    if local is not None and local.is_file():
        return str(local)
    return f"https://picsum.photos/seed/{slug}/{w}/{h}"


def local_report(download_link: Optional[str], base: Path) -> Optional[Path]:
    if not download_link or is_url(download_link):
        return None
    return site_path(download_link, base)


# -----------------------------
# Report preview (PDF pages -> JPEG)
# -----------------------------
@st.cache_data(show_spinner=False)
def _page_jpeg(pdf_path_str: str, page_index: int, dpi: int, quality: int) -> bytes:
    import fitz  # PyMuPDF
    doc = fitz.open(pdf_path_str)
    try:
        mat = fitz.Matrix(dpi/72, dpi/72)
        pix = doc.load_page(page_index).get_pixmap(matrix=mat, colorspace=fitz.csRGB, alpha=False)
        try:
            return pix.tobytes("jpeg", quality=quality)
        except TypeError:
            return pix.tobytes("jpeg")
    finally:
        doc.close()


def show_report_preview(pdf_path: Path, dpi: int = 105, quality: int = 70, chunk_size: int = 3,
                        key_prefix: str = "report"):
    import fitz
    with fitz.open(str(pdf_path)) as d:
        n_pages = d.page_count
    st.caption(f"{pdf_path.name} · {n_pages} pages")

    shown_key = f"{key_prefix}_shown"
    if shown_key not in st.session_state:
        st.session_state[shown_key] = min(chunk_size, n_pages)
    shown = st.session_state[shown_key]

    for i in range(shown):
        st.image(_page_jpeg(str(pdf_path), i, dpi, quality), caption=f"Page {i+1}/{n_pages}",
                 use_container_width=True)

    if shown < n_pages:
        if st.button(f"Show next {min(chunk_size, n_pages-shown)} pages", key=f"{key_prefix}_more",
                     use_container_width=True):
            st.session_state[shown_key] = min(shown + chunk_size, n_pages)
            rerun()


# -----------------------------
# Detail page
# -----------------------------
def _render_section(project: Project, section: Section):
    content = section_content(project, section)
    if content.text:
        safe = escape(content.text).replace("\n", "<br/>")
        st.markdown(f"<div class='blurb'>{safe}</div>", unsafe_allow_html=True)
    if content.heading:
        st.subheader(content.heading)
    if content.items:
        st.markdown("\n".join(f"- {escape(item)}" for item in content.items))
    if not (content.text or content.items):
        st.info(f"No {section.label.lower()} written for this project yet.")


def _render_actions(project: Project, base: Path, show_preview: bool):
    actions = detail_actions(project)
    cols = st.columns(len(actions))
    report = local_report(project.download_link, base)
    for col, action in zip(cols, actions):
        with col:
            if action == "View Project":
                st.link_button("↗ View Project", project.link, use_container_width=True)
            elif action == "Download Report":
                if is_url(project.download_link):
                    st.link_button("⬇️ Download Report", project.download_link, use_container_width=True)
                elif report is None:
                    st.error("Report path is outside the site folder.")
                elif report.is_file():
                    st.download_button("⬇️ Download Report", data=report.read_bytes(), file_name=report.name,
                                       use_container_width=True, key=f"dl_{project.id}")
                else:
                    st.error(f"Missing report at {report}")
            elif action == "Share":
                if st.button("🔗 Share", key=f"share_{project.id}", use_container_width=True):
                    st.query_params["project"] = project.id
                    st.caption(f"Link to this project: `?project={project.id}`")

    if show_preview and report is not None and report.suffix.lower() == ".pdf" and report.is_file():
        with st.expander("Report preview", expanded=False):
            show_report_preview(report, key_prefix=f"report_{project.id}")


def project_detail_page(browser: CatalogBrowser, base: Path, show_preview: bool = True):
    project = browser.current_project()
    if project is None:
        return
    active = browser.selection.active_section

    cols = st.columns([1.2, 1])
    with cols[0]:
        st.title(project.title)
        st.markdown(f"<span class='badge badge-cat'>{project.category.value}</span>", unsafe_allow_html=True)
        st.markdown("**Tools**")
        st.markdown("".join(f"<span class='badge'>{escape(t)}</span>" for t in project.tools),
                    unsafe_allow_html=True)
    with cols[1]:
        st.image(image_source(project.image, project.id, base), use_container_width=True)
    st.markdown("---")

    tabs = st.columns(len(Section))
    for col, section in zip(tabs, Section):
        with col:
            if st.button(section.label, key=f"sec_{section.value}", use_container_width=True,
                         type="primary" if section == active else "secondary"):
                browser.select_section(section)
                rerun()

    _render_section(project, active)

    st.markdown("---")
    _render_actions(project, base, show_preview)

    st.markdown("---")
    c1, c2 = st.columns([1, 1])
    with c1:
        if st.button("← Back to Projects", key="detail_back", use_container_width=True):
            browser.close(); rerun()
    with c2:
        next_id = browser.store.next_visible_id(project.id)
        nxt = browser.store.get(next_id) if next_id is not None else None
        if nxt is not None and nxt.id != project.id:
            if st.button(f"Next: {nxt.title} →", key="detail_next", use_container_width=True):
                browser.open_next(); rerun()
