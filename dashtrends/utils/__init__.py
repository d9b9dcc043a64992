"""Shared formatting helpers"""
