TRANSCRIBE_PROMPT = "Please transcribe this audio into text:"

SUMMARY_PROMPT = "Summarize the following YouTube transcript clearly and concisely:\n\n{transcript}"

URL_PLACEHOLDER = (
    "This is a YouTube video: {url}. "
    "Please summarize it based on its title, metadata, and general knowledge."
)

TRANSCRIPT_NOT_AVAILABLE = "Transcript not available."
