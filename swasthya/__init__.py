# -*- coding: utf-8 -*-
"""Swasthya personal health tracker backend."""
