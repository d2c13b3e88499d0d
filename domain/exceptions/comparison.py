class ComparisonException(Exception):
	pass


class ValidationError(ComparisonException):
	pass


class CollaboratorError(ComparisonException):
	pass


class NoSupportedProvidersError(ComparisonException):
	def __init__(self, source: str, target: str):
		self.source = source
		self.target = target
		super().__init__(
			f'No supported platforms found for {source} to {target} at this moment. '
			'Try a popular corridor like USD to INR.'
		)


class SessionNotFoundError(ComparisonException):
	pass


class CacheError(ComparisonException):
	pass
