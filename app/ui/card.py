# app/ui/card.py

import streamlit as st
import streamlit.components.v1 as components
from services.content import TYPE_LABELS, infer_type, is_pdf, tweet_embed_html, youtube_video_id


def render_card(content, on_delete=None):
    """
    Draws one saved item. `on_delete` is only passed on the owner's dashboard.
    """
    content_type = infer_type(content)
    link = content.get("link")

    with st.container(border=True):
        col1, col2 = st.columns([6, 1])
        with col1:
            st.markdown(f"**{content.get('title', '')}**")
            st.caption(TYPE_LABELS.get(content_type, content_type))
        with col2:
            if on_delete and st.button("🗑️", key=f"delete-{content['id']}"):
                on_delete(content)

        if content_type == "youtube" and youtube_video_id(link):
            st.video(f"https://www.youtube.com/watch?v={youtube_video_id(link)}")
        elif content_type == "image" and link:
            st.image(link, use_container_width=True)
        elif content_type == "twitter" and tweet_embed_html(link):
            components.html(tweet_embed_html(link), height=420, scrolling=True)
        elif content_type == "document" and link and is_pdf(content):
            components.iframe(link, height=400, scrolling=True)

        if content.get("body"):
            st.markdown(content["body"])

        if link:
            label = content.get("filename") or link
            st.markdown(f"[{label}]({link})")

        tags = content.get("tags") or []
        if tags:
            st.caption(" ".join(f"#{t}" for t in tags))
