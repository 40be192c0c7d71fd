# -*- coding: utf-8 -*-
"""Medicines domain (schedule + intake records + adherence)."""
