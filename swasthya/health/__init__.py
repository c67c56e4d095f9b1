# -*- coding: utf-8 -*-
"""Daily health logs and their aggregation."""
