"""Art of the Day - Streamlit application."""

import html
from datetime import datetime

import streamlit as st

from art_of_the_day.adapters import get_source, get_source_names
from art_of_the_day.adapters.base import ArtworkSource
from art_of_the_day.controller import RetryController
from art_of_the_day.display import (
    artwork_details,
    artwork_heading,
    license_links,
    license_text,
    theme_color,
)
from art_of_the_day.errors import ArtFetchError
from art_of_the_day.models import ArtworkRecord, ImageRecord

# Configuration
MAX_ATTEMPTS = 10
N_MAX = 250_000  # Known AIC catalog size; raise by hand as the collection grows
FETCH_TIMEOUT = 30
DEFAULT_SOURCE = "AIC"
LOG_HISTORY = 200
SHUFFLE_LABEL = "Shuffle"

st.set_page_config(page_title="Art of the Day", layout="wide")


# =============================================================================
# Session State Initialization
# =============================================================================

def init_session_state():
    """Initialize all session state variables."""
    defaults = {
        "artwork": None,
        "image": None,
        "last_error": None,  # Message from the last cycle that gave up
        "pending_cycle": True,  # First page load fetches an artwork
        "trigger_enabled": True,
        "debug_logs": [],
        "sources": {},  # short_name -> ArtworkSource, reused across reruns
        # Options
        "source": DEFAULT_SOURCE,
        "source_last": DEFAULT_SOURCE,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


init_session_state()

# Slot the shuffle button is drawn into; filled by set_trigger_enabled()
_trigger_slot = None


# =============================================================================
# Logging
# =============================================================================

def _append_log(level: str, message: str):
    """Append a log entry to session state."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    entry = f"{timestamp} | {level:<5} | {message}"
    st.session_state.debug_logs.append(entry)
    st.session_state.debug_logs = st.session_state.debug_logs[-LOG_HISTORY:]


def log_event(message: str):
    _append_log("INFO", message)


def log_callback(level: str, message: str):
    """Callback for sources and the controller to log through our system."""
    _append_log(level, message)


# =============================================================================
# State Management
# =============================================================================

def check_source_change():
    """Fetch a new artwork when the source selection changes."""
    if st.session_state.source != st.session_state.source_last:
        log_event(f"Source changed: {st.session_state.source_last} -> {st.session_state.source}")
        st.session_state.source_last = st.session_state.source
        st.session_state.pending_cycle = True


def request_shuffle():
    """Shuffle button callback; the cycle runs on the following rerun."""
    log_event("Shuffle clicked")
    st.session_state.pending_cycle = True


# =============================================================================
# Rendering Contract
# =============================================================================

def on_resolved(artwork: ArtworkRecord, image: ImageRecord):
    st.session_state.artwork = artwork
    st.session_state.image = image
    st.session_state.last_error = None


def on_giving_up(error: ArtFetchError):
    st.session_state.artwork = None
    st.session_state.image = None
    st.session_state.last_error = str(error)


def set_trigger_enabled(enabled: bool):
    """Draw the shuffle button, disabled while a cycle is in flight."""
    st.session_state.trigger_enabled = enabled
    if _trigger_slot is None:
        return
    if enabled:
        _trigger_slot.button(SHUFFLE_LABEL, key="shuffle", type="primary", on_click=request_shuffle)
    else:
        _trigger_slot.button(SHUFFLE_LABEL, key="shuffle_busy", type="primary", disabled=True)


# =============================================================================
# Artwork Fetching
# =============================================================================

def get_current_source() -> ArtworkSource:
    """Return the selected source, creating it on first use."""
    short_name = st.session_state.source
    sources = st.session_state.sources
    if short_name not in sources:
        source = get_source(short_name)
        source.fetch_timeout = FETCH_TIMEOUT
        sources[short_name] = source
    source = sources[short_name]
    source.set_logger(log_callback)
    return source


def run_cycle():
    """Resolve one artwork with the selected source."""
    controller = RetryController(
        get_current_source(),
        on_resolved=on_resolved,
        on_giving_up=on_giving_up,
        set_trigger_enabled=set_trigger_enabled,
        max_attempts=MAX_ATTEMPTS,
        n_max=N_MAX,
    )
    controller.set_logger(log_callback)
    return controller.resolve()


# =============================================================================
# UI Components
# =============================================================================

def render_sidebar():
    """Render the sidebar with source selection and debug console."""
    with st.sidebar:
        st.subheader("Options")

        source_names = get_source_names()
        source_options = list(source_names.keys())
        st.selectbox(
            "Source",
            source_options,
            format_func=lambda key: source_names[key],
            key="source",
            help="Direct lookup tries random ids; search asks AIC for a random match",
        )

        # Debug console
        with st.expander("Debug Console", expanded=False):
            if st.button("Clear Logs"):
                st.session_state.debug_logs = []
            log_text = "\n".join(st.session_state.debug_logs) if st.session_state.debug_logs else "No logs yet."
            st.code(log_text, language=None)


def render_lines(text, tag: str = "p"):
    """Render each line of a DisplayText, dimmed when it is a placeholder."""
    for line in text.lines:
        if text.unknown:
            st.markdown(f"<{tag} style='opacity:0.6'><em>{html.escape(line)}</em></{tag}>", unsafe_allow_html=True)
        else:
            st.markdown(f"<{tag}>{html.escape(line)}</{tag}>", unsafe_allow_html=True)


def render_accent(color: str | None):
    """Render a thin banner in the artwork's dominant color."""
    if not color:
        return
    st.markdown(
        f"<div style='height:6px;border-radius:3px;background-color:{color}'></div>",
        unsafe_allow_html=True,
    )


def render_artwork_display(artwork: ArtworkRecord, image: ImageRecord):
    """Render the resolved artwork, its details and license."""
    render_accent(theme_color(artwork))

    col_image, col_meta = st.columns([3, 2], gap="large")

    with col_image:
        st.image(image.url, caption=image.alt_text, use_container_width=True)
        st.link_button("View on artic.edu", artwork.web_url)

    with col_meta:
        title, artist = artwork_heading(artwork)
        render_lines(title, "h2")
        render_lines(artist, "h4")

        for heading, text in artwork_details(artwork, image):
            st.markdown(f"**{heading}**")
            render_lines(text)

    st.divider()
    st.markdown("**License**")
    render_lines(license_text(image))
    for link in license_links(image):
        st.markdown(
            f"<p><a href='{html.escape(link, quote=True)}'>{html.escape(link)}</a></p>",
            unsafe_allow_html=True,
        )


def render_error(message: str):
    """Render the message shown after a cycle gives up."""
    st.subheader("Please try again :(")
    st.markdown("#### Looks like something went wrong.")
    st.markdown("**Error:**")
    st.error(message)


# =============================================================================
# Main Application
# =============================================================================

def main():
    """Main application entry point."""
    global _trigger_slot

    check_source_change()
    render_sidebar()

    st.markdown("### Art of the Day")
    st.caption(
        "Rarely viewed, public-domain works from the "
        "[Art Institute of Chicago](https://api.artic.edu/docs/)"
    )

    _trigger_slot = st.empty()

    if st.session_state.pending_cycle:
        st.session_state.pending_cycle = False
        with st.spinner("Finding a hidden gem..."):
            result = run_cycle()
        log_event(f"Cycle finished: {result.state.value} after {result.attempts} attempt(s)")
    else:
        set_trigger_enabled(True)

    if st.session_state.artwork is not None and st.session_state.image is not None:
        render_artwork_display(st.session_state.artwork, st.session_state.image)
    elif st.session_state.last_error:
        render_error(st.session_state.last_error)


if __name__ == "__main__":
    main()
