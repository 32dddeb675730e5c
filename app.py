"""
Product Trend Analyst - Streamlit Application Entry Point

Run with: streamlit run app.py
"""

from trend_analyst.ui.app import main

if __name__ == "__main__":
    main()
