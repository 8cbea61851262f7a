"""roster — Student record store backed by a flat text file.

Keeps a roster of students (roll number, name, course, grade, email,
contact) in memory, rewrites students.txt after every change, and exposes
add/update/delete/search through a small CLI.

Usage:
    python -m roster list                          # Show every student
    python -m roster add R1 Alice --course BCA     # Add a student
    python -m roster search alice                  # Filter across all fields
    python -m roster delete R1 --yes               # Remove a student
"""
