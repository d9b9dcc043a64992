"""Trend dashboard widgets: calculation, chart data and card rendering"""
