import streamlit as st
import streamlit.components.v1 as components
import requests
import os

API_BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")
VIEWS = [("report", "📖 Report"), ("summaries", "📋 Summaries"), ("qna", "💬 Q&A"), ("quiz", "📝 Quiz")]

st.set_page_config(page_title="Trillium Model Knowledge Base", layout="wide")
st.title("📚 Trillium Model Knowledge Base")


def api(method: str, path: str, **kwargs):
    resp = requests.request(method, f"{API_BASE}{path}", timeout=300, **kwargs)
    if not resp.ok:
        detail = resp.json().get("detail") if resp.headers.get("content-type", "").startswith("application/json") else resp.text
        if isinstance(detail, dict):
            detail = detail.get("message", detail)
        st.error(detail)
        return None
    return resp.json()


def session_path(suffix: str = "") -> str:
    return f"/sessions/{st.session_state['session_id']}{suffix}"


# One backend session per browser session; recreate if the backend restarted.
if "session_id" not in st.session_state or requests.get(f"{API_BASE}{session_path()}", timeout=30).status_code == 404:
    st.session_state["session_id"] = api("POST", "/sessions")["session_id"]
state = api("GET", session_path())

# Header: search + navigation
def _on_search():
    api("PUT", session_path("/search"), json={"term": st.session_state["search"]})

if "search" not in st.session_state:
    st.session_state["search"] = state["search_term"]
st.text_input("🔎 Search the report...", key="search", on_change=_on_search)
cols = st.columns(len(VIEWS))
for col, (mode, label) in zip(cols, VIEWS):
    if col.button(label, type="primary" if state["view"] == mode else "secondary", use_container_width=True):
        with st.spinner("Generating summary..." if mode == "summaries" else "Loading..."):
            state = api("PUT", session_path("/view"), json={"mode": mode}) or state
        st.rerun()

view = state["view"]

if view == "report":
    st.markdown("Use the buttons above to explore the report, get summaries, ask questions, or take a quiz.")
    resp = requests.get(f"{API_BASE}/report", params={"search": state["search_term"]}, timeout=30)
    components.html(f"<style>mark{{background:#fde047;font-weight:bold}}</style>{resp.text}", height=900, scrolling=True)

elif view == "summaries":
    s = state["summaries"]
    st.subheader("Section Summaries")
    left, mid, right = st.columns([1, 6, 1])
    if left.button("◀", disabled=not s["can_previous"]):
        with st.spinner("Generating summary..."):
            api("POST", session_path("/summaries/previous"))
        st.rerun()
    mid.markdown(f"### {s['title']}  \n_{s['index'] + 1} / {s['total']}_")
    if right.button("▶", disabled=not s["can_next"]):
        with st.spinner("Generating summary..."):
            api("POST", session_path("/summaries/next"))
        st.rerun()
    if s["status"] == "loading":
        st.info("Generating summary...")
    elif s["error"]:
        st.warning(s["text"])
    else:
        st.write(s["text"])

elif view == "qna":
    qna = state["qna"]
    st.subheader("Ask a Question")
    question = st.text_area("Ask a question about the Trillium Model...", height=120,
                            disabled=qna["status"] == "loading")
    if st.button("Get Answer", type="primary", disabled=qna["status"] == "loading" or not question.strip()):
        with st.spinner("Thinking..."):
            state = api("POST", session_path("/qa"), json={"question": question}) or state
        qna = state["qna"]
    if qna["answer"]:
        st.markdown("**Answer:**")
        (st.warning if qna["error"] else st.write)(qna["answer"])

elif view == "quiz":
    quiz = state["quiz"]
    st.subheader("Quiz")
    if st.button("Start New Quiz", type="primary", disabled=quiz["status"] == "loading"):
        with st.spinner("Generating Quiz..."):
            started = api("POST", session_path("/quiz"))
        if started:
            st.rerun()
    elif quiz["status"] == "empty" and quiz["error"]:
        st.error(f"Failed to generate quiz: {quiz['error']}")

    if quiz["status"] == "in_progress":
        for i, q in enumerate(quiz["questions"]):
            chosen = quiz["answers"].get(str(i))
            pick = st.radio(f"{i + 1}. {q['question']}", q["options"],
                            index=q["options"].index(chosen) if chosen in q["options"] else None,
                            key=f"quiz_{i}")
            if pick is not None and pick != chosen:
                api("PUT", session_path(f"/quiz/answers/{i}"), json={"option": pick})
                st.rerun()
        if st.button("Submit Answers", disabled=not quiz["can_submit"]):
            api("POST", session_path("/quiz/submit"))
            st.rerun()

    elif quiz["status"] == "submitted":
        st.markdown(f"## Your Score: {quiz['score']} / {len(quiz['questions'])}")
        st.markdown("Review your answers below:")
        for i, q in enumerate(quiz["questions"]):
            mine = quiz["answers"].get(str(i))
            st.markdown(f"**{i + 1}. {q['question']}**")
            if mine == q["correctAnswer"]:
                st.success(f"Your Answer: {mine}")
            else:
                st.error(f"Your Answer: {mine or 'No answer'}")
                st.success(f"Correct Answer: {q['correctAnswer']}")
