"""Prompt Kit HTTP API"""
