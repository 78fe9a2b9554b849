"""Database access for teachers and courses."""