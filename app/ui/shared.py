# app/ui/shared.py

import streamlit as st
from services.api import get_shared_brain
from ui.card import render_card


def shared_page(share_hash):
    data = get_shared_brain(share_hash)

    if data.get("error"):
        st.title("🧠 Brain Not Found")
        if data.get("status") == 404:
            st.error("공유 링크를 찾을 수 없거나 삭제되었습니다.")
        else:
            st.error(data["error"])
        return

    owner = data.get("owner")
    st.title(f"🧠 {owner}'s Brain" if owner else "🧠 Shared Brain")
    st.caption("공개 보기 · 읽기 전용")

    contents = data.get("contents", [])
    if not contents:
        st.info("아직 공유된 콘텐츠가 없습니다.")
        return

    st.write(f"{len(contents)}개 항목")
    columns = st.columns(2)
    for i, content in enumerate(contents):
        with columns[i % 2]:
            render_card(content)
