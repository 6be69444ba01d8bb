"""Clinic application.

Models, serializers, services and API views for patients, doctors, staff,
appointments, billing and medical records, plus the role dashboards.
"""
