# -*- coding: utf-8 -*-
# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3

"""Utility modules for Cupom Verde"""
