import streamlit as st

PRIMARY_ACCENT = "#2563EB"  # blue-600
CARD_BG = "#eef6ff"
CARD_BORDER = "#d2e6fb"
RED = "#DC2626"  # red-600


def inject_base_css():
    if getattr(inject_base_css, "_applied", False):
        return
    inject_base_css._applied = True
    st.markdown(
        f"""
        <style>
        .weather-card {{
            background:{CARD_BG}; border:1px solid {CARD_BORDER};
            padding:14px 18px; border-radius:12px; line-height:1.55;
        }}
        .weather-card .place {{font-size:1.2rem; font-weight:600; margin:0;}}
        .weather-card .condition {{color:{PRIMARY_ACCENT}; font-weight:600;}}
        .weather-meta {{font-size:12px; color:#666;}}
        .error-pill {{display:inline-block; padding:4px 10px; border-radius:14px;
            font-size:12px; font-weight:600; background:{RED}; color:#F9FAFB;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def page_header(title: str, caption: str = ""):
    st.header(title)
    if caption:
        st.caption(caption)
