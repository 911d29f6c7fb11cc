# ycomb_pi/core/__init__.py
