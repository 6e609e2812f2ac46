"""
DDx Refine — Web UI (Streamlit)

Інтерактивна діагностика з уточнюючими питаннями.
Тонкий клієнт REST API: весь стан протоколу живе на сервері.

Запуск:
    streamlit run ddx_refine/web_ui/app.py

    або:

    python scripts/run_web.py
"""

import os

import requests
import streamlit as st

API_URL = os.getenv("DDX_API_URL", "http://localhost:8000")

st.set_page_config(
    page_title="Diagnosis — DDx Refine",
    page_icon="🏥",
    layout="wide",
)

st.title("🏥 Health Prediction Dashboard")
st.markdown("Оберіть симптоми, а система уточнить діагноз питаннями.")

st.divider()

# Ініціалізація session state
if "session_id" not in st.session_state:
    st.session_state.session_id = None
if "session_data" not in st.session_state:
    st.session_state.session_data = None
if "error" not in st.session_state:
    st.session_state.error = ""


def api_error(r) -> str:
    try:
        return r.json().get("detail") or r.text
    except ValueError:
        return r.text


# Перевірка API
def check_api():
    try:
        r = requests.get(f"{API_URL}/health", timeout=2)
        return r.status_code == 200
    except requests.RequestException:
        return False


if not check_api():
    st.error("❌ API сервер недоступний!")
    st.info("Запустіть: `python scripts/run_api.py`")
    st.stop()


# Отримуємо каталог симптомів
@st.cache_data(ttl=300)
def get_symptoms():
    try:
        r = requests.get(f"{API_URL}/api/symptoms", params={"limit": 1000}, timeout=5)
        r.raise_for_status()
        return {s["id"]: s["label"] for s in r.json()}
    except requests.RequestException:
        return None


def start_session(symptoms: list):
    """Створити сесію та отримати перший прогноз"""
    try:
        r = requests.post(f"{API_URL}/api/sessions", json={"symptoms": symptoms}, timeout=30)
    except requests.RequestException:
        st.session_state.error = "Error predicting disease. Please try again."
        return None
    if r.status_code != 200:
        st.session_state.error = api_error(r)
        return None
    return r.json()


def confirm_symptom(session_id: str, symptom: str, confirmed: bool):
    """Відповісти на уточнююче питання"""
    try:
        r = requests.post(
            f"{API_URL}/api/sessions/{session_id}/confirm",
            json={"symptom": symptom, "confirmed": confirmed},
            timeout=30,
        )
    except requests.RequestException:
        st.session_state.error = "Error refining prediction. Please try again."
        return None
    if r.status_code != 200:
        st.session_state.error = api_error(r)
        return None
    return r.json()["session_state"]


def discard_session():
    """Відкинути поточну сесію (новий вибір = нова сесія)"""
    if st.session_state.session_id:
        try:
            requests.delete(f"{API_URL}/api/sessions/{st.session_state.session_id}", timeout=5)
        except requests.RequestException:
            pass
    st.session_state.session_id = None
    st.session_state.session_data = None
    st.session_state.error = ""


catalog = get_symptoms()
if catalog is None:
    st.warning("Failed to load symptoms.")
    catalog = {}

# ========== ВИБІР СИМПТОМІВ ==========
selected = st.multiselect(
    "Симптоми:",
    options=list(catalog.keys()),
    format_func=lambda s: catalog.get(s, s),
    placeholder="Type to search initial symptoms...",
    key="selection",
    on_change=discard_session,
)

if st.button("▶️ Predict", type="primary"):
    discard_session()
    if not selected:
        st.session_state.error = "Please select at least one symptom."
    else:
        data = start_session(selected)
        if data:
            st.session_state.session_id = data["session_id"]
            st.session_state.session_data = data
    st.rerun()

if st.session_state.error:
    st.error(st.session_state.error)

session_data = st.session_state.session_data

if session_data:
    outcome = session_data.get("outcome") or {}
    kind = outcome.get("kind")

    col_main, col_side = st.columns([2, 1])

    with col_side:
        st.markdown("### 📋 Сесія")
        st.markdown(f"**Раунд:** {session_data['round']}/{session_data['max_rounds']}")

        confirmed = session_data.get("confirmed_symptoms", [])
        if confirmed:
            st.markdown("**Confirmed Symptoms:**")
            for s in confirmed:
                st.markdown(f"✅ {catalog.get(s, s)}")

        denied = session_data.get("denied_symptoms", [])
        if denied:
            st.markdown("**Заперечені симптоми:**")
            for s in denied:
                st.markdown(f"❌ {catalog.get(s, s)}")

    with col_main:
        if kind == "resolved":
            st.success(f"**Predicted Disease:** {outcome['diagnosis']}")
            if outcome.get("forced"):
                st.caption("Найімовірніший кандидат після вичерпання уточнень.")

        elif kind == "escalated":
            st.warning(f"**Потрібна консультація:** {outcome['reason']}")
            if outcome.get("fallback_diagnosis"):
                st.markdown(f"Попередній діагноз: **{outcome['fallback_diagnosis']}**")

        elif kind == "ambiguous":
            st.subheader("Possible Diseases:")
            for i, disease in enumerate(outcome.get("candidates", []), start=1):
                st.markdown(f"{i}. {disease}")

            st.divider()

            enabled = session_data.get("accepts_confirmation", False)
            question_no = session_data["round"] + 1

            for symptom in outcome.get("follow_ups", []):
                st.markdown(
                    f"#### Do you have this symptom? ({question_no}/{session_data['max_rounds']})"
                )
                st.markdown(f"*{catalog.get(symptom, symptom)}*")

                col_yes, col_no = st.columns(2)
                with col_yes:
                    yes = st.button("✅ Yes", key=f"yes-{symptom}", disabled=not enabled, use_container_width=True)
                with col_no:
                    no = st.button("❌ No", key=f"no-{symptom}", disabled=not enabled, use_container_width=True)

                if yes or no:
                    st.session_state.error = ""
                    new_state = confirm_symptom(st.session_state.session_id, symptom, bool(yes))
                    if new_state:
                        st.session_state.session_data = new_state
                    st.rerun()

        if session_data.get("is_terminal"):
            st.divider()
            if st.button("🆕 Нова діагностика"):
                discard_session()
                st.rerun()

# Footer
st.divider()
st.caption("⚠️ Ця система не замінює консультацію з лікарем.")
