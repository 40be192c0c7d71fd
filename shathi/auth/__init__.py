# -*- coding: utf-8 -*-
"""Identity (demo user) handling."""
