"""
Seed courses for the 200 level timetable
"""
from backend.models import ScheduleEntry

FIRST_SEMESTER_COURSES = [
    ScheduleEntry("GES 201", "Use of English 2", "Monday",
                  "8:00 AM", "10:00 AM", "Room 101", "Dr. Johnson"),
    ScheduleEntry("GES 105", "Agriculture, Renewable Natural Resources, Animal Husbandry & Health",
                  "Monday", "1:00 PM", "3:00 PM", "Room 102", "Prof. Adams"),
    ScheduleEntry("LPU 201", "Constitutional Law 1", "Tuesday",
                  "9:00 AM", "11:00 AM", "Law Theatre 1", "Prof. Adebayo"),
    ScheduleEntry("LJI 201", "Nigerian Legal System 1", "Tuesday",
                  "2:00 PM", "4:00 PM", "Law Theatre 2", "Dr. Nwachukwu"),
    ScheduleEntry("LCI 201", "Contract Law 1", "Wednesday",
                  "10:00 AM", "12:00 PM", "Room 303", "Dr. Clark"),
    ScheduleEntry("LPP 201", "Reproductive and Sexual Health Law 1", "Thursday",
                  "8:00 AM", "10:00 AM", "Law Theatre 3", "Prof. Williams"),
    ScheduleEntry("SOC 208", "Entrepreneurship and Leadership Development", "Friday",
                  "1:00 PM", "3:00 PM", "Business Hall", "Dr. Thompson"),
]

SECOND_SEMESTER_COURSES = [
    ScheduleEntry("GES 104", "Science, Industry and Mankind", "Monday",
                  "10:00 AM", "12:00 PM", "Science Block", "Dr. Phillips"),
    ScheduleEntry("GES 106", "Philosophy, Logic and Critical Thinking", "Monday",
                  "3:00 PM", "5:00 PM", "Arts Building", "Prof. Franklin"),
    ScheduleEntry("LPU 202", "Constitutional Law 2", "Tuesday",
                  "11:00 AM", "1:00 PM", "Law Theatre 1", "Prof. Adebayo"),
    ScheduleEntry("LJI 202", "Nigerian Legal System 2", "Wednesday",
                  "9:00 AM", "11:00 AM", "Law Theatre 2", "Dr. Nwachukwu"),
    ScheduleEntry("LCI 202", "Contract Law 2", "Thursday",
                  "1:00 PM", "3:00 PM", "Room 303", "Dr. Clark"),
    ScheduleEntry("LPP 202", "Reproductive and Sexual Health Law 2", "Thursday",
                  "3:00 PM", "5:00 PM", "Law Theatre 3", "Prof. Williams"),
    ScheduleEntry("LAW 201", "Introduction to Law and Psychology", "Friday",
                  "9:00 AM", "11:00 AM", "Psychology Building", "Dr. Morgan"),
]

SEMESTERS = {
    "1st Semester": FIRST_SEMESTER_COURSES,
    "2nd Semester": SECOND_SEMESTER_COURSES,
}
