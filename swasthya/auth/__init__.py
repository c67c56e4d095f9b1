# -*- coding: utf-8 -*-
"""Accounts: signup, login, bearer tokens."""
