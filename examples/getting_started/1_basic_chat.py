"""
Basic chat example using the bundled FAQ corpus and answers.

Requires the NLTK data packages punkt_tab, averaged_perceptron_tagger_eng and wordnet:
    python -m nltk.downloader punkt_tab averaged_perceptron_tagger_eng wordnet
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from faq_chatbot import FaqChatbot

# Load the corpus and answers, and train the category model once
chatbot = FaqChatbot.from_config()

print(f"Known categories: {', '.join(chatbot.get_categories())}")
print("Type a question, an empty line quits.")
print("=" * 50)

while True:
    question = input("\nYou: ")
    if not question:
        break

    # Show the category picked for each sentence
    for result in chatbot.classify(question):
        print(f"   [{result.category}: {result.confidence:.4f}]")

    response = chatbot.answer(question)
    print(f"Chat Bot:{response.answer}")

    if response.conversation_complete:
        break
