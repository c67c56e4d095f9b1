# -*- coding: utf-8 -*-
"""Profiles and goal configuration."""
