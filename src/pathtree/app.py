"""Streamlit UI for PathTree."""

from __future__ import annotations

import streamlit as st

from pathtree.models import TreeOptions
from pathtree.path_filter import check_options, parse_pattern_input
from pathtree.tree_builder import format_tree

_PREVIEW_MAX_LINES = 1000
_TRUE_VALUES = ("1", "true", "yes", "on")


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="PathTree",
        page_icon="🌳",
        layout="wide",
    )

    # Hide Streamlit's default toolbar (Deploy, Stop, etc.)
    st.markdown(
        "<style>[data-testid='stToolbar'] { display: none; }</style>",
        unsafe_allow_html=True,
    )

    st.title("PathTree")
    st.caption("Paste a list of paths (one per line) to see them as a directory tree.")

    raw_paths = st.text_area(
        "Paths",
        height=240,
        placeholder="src/main.rs\nsrc/lib/tree_generator.rs\nCargo.toml",
        help="Output of `git ls-files`, `find . -type f` or similar.",
    )

    col_sep, col_compact = st.columns([1, 3])
    with col_sep:
        separator = st.text_input("Separator", value=_qp("separator", "/"), max_chars=4)
    with col_compact:
        st.markdown("<div style='height: 1.8rem'></div>", unsafe_allow_html=True)
        compact = st.checkbox(
            "Compact",
            value=_qp("compact").lower() in _TRUE_VALUES,
            help="Join chains of single-child directories on one line.",
        )

    include_raw = st.text_input(
        "Include (regex, comma-separated)",
        value=_qp("include"),
        placeholder=r"\.py$, ^src/",
        help="Only paths matching at least one pattern are shown. Leave empty to show all.",
    )
    exclude_raw = st.text_input(
        "Exclude (regex, comma-separated)",
        value=_qp("exclude"),
        placeholder=r"^tests/, __pycache__",
        help="Paths matching any pattern are hidden.",
    )

    options = TreeOptions(
        separator=separator,
        compact=compact,
        include=parse_pattern_input(include_raw),
        exclude=parse_pattern_input(exclude_raw),
    )
    errors = check_options(options)
    for err in errors:
        st.error(f"Invalid regex: {err}")
    if not separator:
        st.error("Separator must not be empty.")

    if errors or not separator or not raw_paths.strip():
        return

    tree_text = format_tree(raw_paths.splitlines(), options)

    if not tree_text:
        st.warning("No paths left to display.")
        return

    _show_result(tree_text)


def _show_result(tree_text: str) -> None:
    """Display the tree preview and a download button."""
    st.download_button(
        label="Download tree.txt",
        data=tree_text,
        file_name="tree.txt",
        mime="text/plain",
        use_container_width=True,
    )

    preview_lines = tree_text.splitlines()
    if len(preview_lines) > _PREVIEW_MAX_LINES:
        st.code("\n".join(preview_lines[:_PREVIEW_MAX_LINES]), language="text")
        st.caption(
            f"Preview is truncated to {_PREVIEW_MAX_LINES:,} lines "
            f"(total {len(preview_lines):,} lines). "
            "Download the file for the full tree."
        )
    else:
        st.code(tree_text, language="text")


if __name__ == "__main__":
    main()
