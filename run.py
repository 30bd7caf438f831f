"""Entry point for `streamlit run run.py`."""

from wood_beam_calculator.app import main

main()
