"""Request handlers of the teacher service: health check, teachers and courses."""