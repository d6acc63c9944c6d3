class StudyAidError(Exception):
	"""Base class for errors that end a request before the provider answers."""

	status_code = 500

	def __init__(self, message: str) -> None:
		super().__init__(message)
		self.message = message


class ValidationError(StudyAidError):
	status_code = 400


class ConfigurationError(StudyAidError):
	status_code = 500
