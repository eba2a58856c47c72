"""
Streamlit front end
"""
