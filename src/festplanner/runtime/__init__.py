"""
Planning runtime: filter pipeline, timeline layout, ranked favorites,
screening selection and the session that owns their durable state.
"""
