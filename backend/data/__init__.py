from .semester_courses import FIRST_SEMESTER_COURSES, SECOND_SEMESTER_COURSES, SEMESTERS

__all__ = ['FIRST_SEMESTER_COURSES', 'SECOND_SEMESTER_COURSES', 'SEMESTERS']
