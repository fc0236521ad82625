"""Operator CLI package"""
