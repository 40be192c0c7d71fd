# -*- coding: utf-8 -*-
"""Per-user settings (theme, language, glucose unit, target range)."""
