"""JSON web service for teachers and courses, and a health-check-only service."""