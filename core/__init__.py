# -*- coding: utf-8 -*-
"""
StringEdit Core Package

Background execution of sync collaborator calls and text helpers.
"""
