"""
Quiz Module

- Candidate starts with name + email, no login
- Questions are served one by one by position, answers scored on submit
- Admin sees every candidate's score (JSON or CSV) with the shared password
"""

# Blueprint cho candidate (public)
from quizapp.quiz.routes import quiz_bp

# Blueprint cho admin (shared password)
from quizapp.quiz.admin_routes import quiz_admin_bp

__all__ = ['quiz_bp', 'quiz_admin_bp']
