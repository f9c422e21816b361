full_system_template = (
    "You are a helpful assistant that summarizes YouTube video transcripts concisely."
)

full_user_template = """
    Please provide a concise summary of the following YouTube video transcript.
    Focus on the main points and key insights:

    {text}
    """

segment_system_template = (
    "You are a helpful assistant that summarizes segments of YouTube video transcripts concisely."
)

segment_user_template = """
    Please provide a brief summary of this segment of a YouTube video transcript:

    {text}
    """
