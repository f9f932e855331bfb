# app/ui/dashboard.py

import streamlit as st
from services.api import (
    list_contents,
    add_content,
    delete_content,
    upload_file,
    get_share_status,
    set_share,
)
from services.content import CONTENT_TYPES, TYPE_LABELS, filter_contents, parse_tags
from ui.card import render_card


def dashboard_page():
    token = st.session_state["access_token"]

    content_type = st.session_state.get("type_filter")
    title = TYPE_LABELS[content_type] if content_type else "전체 콘텐츠"
    st.header(title)

    handle_share(token)

    if st.button("➕ 콘텐츠 추가"):
        st.session_state["show_add_content"] = not st.session_state.get("show_add_content", False)

    if st.session_state.get("show_add_content"):
        handle_add_content(token)

    contents = list_contents(token)
    if isinstance(contents, dict) and contents.get("error"):
        st.error(contents["error"])
        return

    visible = filter_contents(contents, content_type)
    if not visible:
        st.info("저장된 콘텐츠가 없습니다.")
        return

    def on_delete(content):
        result = delete_content(token, content["id"])
        if result.get("error"):
            st.error(result["error"])
        else:
            st.success(f"{content['title']} 삭제 완료")
            st.rerun()

    columns = st.columns(2)
    for i, content in enumerate(visible):
        with columns[i % 2]:
            render_card(content, on_delete=on_delete)


def handle_share(token):
    status = get_share_status(token)
    if status.get("error"):
        st.error(status["error"])
        return

    shared = st.toggle("🔗 내 브레인 공유하기", value=status.get("share", False))
    if shared != status.get("share", False):
        result = set_share(token, shared)
        if result.get("error"):
            st.error(result["error"])
        else:
            st.rerun()

    if status.get("share"):
        st.caption("링크를 가진 누구나 읽기 전용으로 볼 수 있습니다.")
        st.code(status["shareLink"], language=None)


def handle_add_content(token):
    content_type = st.selectbox(
        "종류",
        options=CONTENT_TYPES,
        format_func=lambda t: TYPE_LABELS[t],
        key="new_content_type",
    )

    with st.form("add_content_form", clear_on_submit=True):
        title = st.text_input("제목")
        link = st.text_input("링크 (URL)")
        body = ""
        uploaded = None
        if content_type in ("text", "document"):
            body = st.text_area("본문")
        if content_type in ("image", "document"):
            uploaded = st.file_uploader("파일 업로드")
        tags = st.text_input("태그 (쉼표로 구분)")
        submitted = st.form_submit_button("💾 저장")

    if not submitted:
        return

    payload = {
        "title": title.strip(),
        "type": content_type,
        "link": link.strip() or None,
        "body": body.strip() or None,
        "tags": parse_tags(tags),
    }

    if uploaded is not None:
        result = upload_file(token, uploaded)
        if result.get("error"):
            st.error(result["error"])
            return
        payload["link"] = payload["link"] or result["url"]
        payload["filename"] = result["filename"]
        payload["mime"] = result["mime"]

    result = add_content(token, payload)
    if result.get("error"):
        st.error(result["error"])
        return

    st.success("✅ 저장 완료")
    st.session_state["show_add_content"] = False
    st.rerun()
