from __future__ import annotations

import html

import streamlit as st

from components.outfit_display import format_price, score_label, score_percent


def apply_theme() -> None:
    st.markdown(
        """
        <style>
          @import url('https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;600&family=Cormorant+Garamond:wght@500;600;700&display=swap');

          :root {
            --bg: #f8f5f1;
            --surface: #fffdfa;
            --text: #1d1a18;
            --muted: #6f6760;
            --line: #e8dfd5;
            --accent: #d4553c;
            --accent-dark: #ba432d;
            --excellent: #2f7d4f;
            --good: #b7791f;
          }

          .stApp {
            background: var(--bg);
            color: var(--text);
            font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
          }

          .block-container {
            max-width: 1100px;
            padding-top: 1.0rem;
            padding-bottom: 2rem;
          }

          h1, h2, h3 {
            color: var(--text) !important;
            letter-spacing: -0.01em;
          }

          .hero-wrap {
            border: 1px solid var(--line);
            background: linear-gradient(180deg, rgba(255,255,255,0.82), rgba(255,251,246,0.75));
            border-radius: 20px;
            padding: 1.8rem 1.4rem;
            margin-bottom: 1rem;
          }

          .display-serif {
            font-family: 'Cormorant Garamond', Georgia, serif;
            font-size: 3.1rem;
            line-height: 0.98;
            letter-spacing: -0.02em;
            margin: 0;
          }

          .hero-sub {
            color: var(--muted) !important;
            margin-top: 0.5rem;
            font-size: 1rem;
          }

          .section-card {
            border: 1px solid var(--line);
            border-radius: 14px;
            background: rgba(255,255,255,0.86);
            padding: 0.8rem 0.95rem;
            margin: 0.9rem 0 0.45rem 0;
          }

          .section-title { font-weight: 600; font-size: 1.01rem; }
          .section-hint { color: var(--muted) !important; font-size: 0.89rem; margin-top: 0.12rem; }

          .slot-label {
            color: var(--muted);
            font-size: 0.72rem;
            font-weight: 500;
            text-transform: uppercase;
            letter-spacing: 0.06em;
          }

          .score-badge {
            display: inline-block;
            border-radius: 999px;
            padding: 0.2rem 0.7rem;
            font-size: 0.8rem;
            font-weight: 600;
            color: #fff;
            background: var(--muted);
          }
          .score-badge.excellent { background: var(--excellent); }
          .score-badge.great { background: var(--good); }

          .stButton > button {
            border-radius: 10px;
            border: 1px solid var(--line);
            font-weight: 600;
          }

          .stButton > button[kind="primary"] {
            background: var(--accent);
            color: white;
            border-color: transparent;
          }

          .stButton > button[kind="primary"]:hover {
            background: var(--accent-dark);
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


def hero_block() -> None:
    st.markdown(
        """
        <div class="hero-wrap">
          <div class="display-serif">Outfit Studio</div>
          <div class="hero-sub">Pick one piece and get complete looks built around it, styled in under a second.</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def section_header(title: str, hint: str) -> None:
    st.markdown(
        f"""
        <div class="section-card">
          <div class="section-title">{html.escape(title)}</div>
          <div class="section-hint">{html.escape(hint)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def slot_heading(label: str) -> None:
    st.markdown(f"<div class='slot-label'>{html.escape(label)}</div>", unsafe_allow_html=True)


def score_badge(score: float) -> None:
    label = score_label(score)
    cls = label.split()[0].lower()
    st.markdown(
        f"<span class='score-badge {cls}'>{score_percent(score)}% {label}</span>",
        unsafe_allow_html=True,
    )


def price_caption(amount: int) -> None:
    st.caption(format_price(amount))
