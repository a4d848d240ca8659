SUMMARY_PROMPT = """Summarize the following section from a theoretical physics report in a concise paragraph. Do not use markdown headers or titles. Do not introduce the summary with phrases like "This section is about" or "In this section...". Just provide the summary.

Section Title: {title}
Section Content: {content}"""

ANSWER_PROMPT = """Based on the following document, answer the user's question. If the information is not in the document, state that you cannot answer.

Document:
{document}

Question: {question}"""

QUIZ_PROMPT = """Create a {num_questions}-question multiple-choice quiz based on the following document. The response must be a valid JSON object with a single 'quiz' key. The value of 'quiz' should be an array of objects. Each object in the array must have the following keys: 'question' (string), 'options' (array of strings, exactly {num_options} options), and 'correctAnswer' (string, the correct option). Do not include any other text in the response, just the JSON.

Document:
{document}"""
