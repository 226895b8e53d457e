"""Prompt Kit command line interface"""
