"""Celery worker and HTTP trigger for the transcription pipeline."""
