"""Lost & Found board API."""
