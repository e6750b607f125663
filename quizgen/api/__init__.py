"""HTTP API for quizgen."""
