"""
DDx Refine — Web UI Module

Streamlit веб-інтерфейс для інтерактивної діагностики.

Запуск:
    streamlit run ddx_refine/web_ui/app.py

    або:

    python scripts/run_web.py

Вимоги:
    - Streamlit >= 1.28.0
    - Requests
    - API сервер (python scripts/run_api.py)
"""
