# -*- coding: utf-8 -*-
"""Glucose domain (readings + range summary)."""
