"""
Timetable backend: pull-to-refresh controller and timetable exports
"""
