"""HTML front end that lists and registers teachers through the teacher service."""