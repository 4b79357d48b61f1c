summary_template = """Analyze this educational video transcript and create a comprehensive summary. Focus on key concepts, definitions, procedures, and learning objectives.

Title: "{title}"
Transcript: {transcript}

Create a detailed summary that includes:
1. Main topic and learning objectives
2. Key concepts and definitions
3. Important procedures or methods discussed
4. Practical applications mentioned
5. Key takeaways for learners"""


flashcard_guidance = {
    "easy": "Create basic recall and definition questions. Focus on direct facts, terminology, and simple concepts explicitly stated in the content. Questions should test memory and recognition of key terms.",
    "medium": "Create application and comprehension questions. Focus on understanding, comparing concepts, explaining processes, and applying knowledge. Questions should test deeper understanding beyond memorization.",
    "hard": "Create analysis, synthesis, and evaluation questions. Focus on connecting multiple concepts, analyzing relationships, solving complex problems, and critical thinking. Questions should test mastery and advanced application.",
}

flashcard_examples = {
    "easy": '"What is [specific term] as defined in this video?" or "According to the video, what does [concept] mean?"',
    "medium": '"How does the video explain the relationship between [concept A] and [concept B]?" or "What steps does the video show for [process]?"',
    "hard": '"Why would you choose [method A] over [method B] based on the scenarios discussed?" or "How do the concepts of [A], [B], and [C] work together to solve [complex problem]?"',
}

flashcard_template = """You are an expert educator creating {difficulty}-level flashcards from this educational video content.

CONTENT TO ANALYZE:
Title: "{title}"
Transcript: "{transcript}"

TASK: Create exactly {count} flashcards at {difficulty} difficulty level.
{guidance}

DIFFICULTY GUIDELINES:
- EASY: Simple recall, definitions, basic facts directly stated
- MEDIUM: Understanding processes, explaining concepts, practical applications
- HARD: Analysis, synthesis, complex problem-solving, advanced reasoning

EXAMPLE QUESTION TYPES FOR {difficulty_upper}:
{examples}

CRITICAL REQUIREMENTS:
1. Extract specific facts, concepts, and processes from the actual transcript
2. Questions must reference exact content discussed in the video
3. Use precise terminology and examples from the transcript
4. Each question tests a different concept from the content
5. Answers must be comprehensive and educational
6. NO generic or placeholder questions - only content-specific

FORMAT: Return ONLY a valid JSON array:
[{{"question":"[Difficulty-appropriate question based on actual video content]","answer":"[Detailed answer with specific information from the video]","difficulty":"{difficulty}"}}]"""


quiz_guidance = {
    "easy": "Create basic multiple choice questions about definitions, facts, and terminology directly mentioned. Test simple recall and recognition.",
    "medium": "Create questions testing understanding, processes, and practical applications. Test comprehension and ability to explain concepts.",
    "hard": "Create analytical questions requiring synthesis of multiple concepts, problem-solving, and critical evaluation. Test mastery and advanced reasoning.",
}

quiz_examples = {
    "easy": "Focus on 'what is...', 'according to the video...', 'which term describes...' type questions",
    "medium": "Focus on 'how does...', 'why is...', 'what happens when...' type questions",
    "hard": "Focus on 'analyze the relationship...', 'compare and contrast...', 'what would happen if...' type questions",
}

quiz_template = """You are creating {difficulty}-level multiple choice quiz questions from this educational video content.

CONTENT TO ANALYZE:
Title: "{title}"
Transcript: "{transcript}"

TASK: Create exactly {count} multiple choice questions at {difficulty} difficulty.
{guidance}

DIFFICULTY REQUIREMENTS FOR {difficulty_upper}:
{examples}

CRITICAL REQUIREMENTS:
1. Questions must reference specific content from the transcript above
2. Use exact terminology and examples mentioned in the video
3. Create exactly 4 distinct options per question
4. The correct_answer must be copied exactly from one of the options
5. Provide detailed explanations referencing actual video content

FORMAT: Return ONLY a valid JSON array:
[{{"question":"[Difficulty-appropriate question about specific video content]","options":["Correct answer from video","Plausible wrong option","Another wrong option","Third wrong option"],"correct_answer":"Correct answer from video","explanation":"Detailed explanation using specific information from the video transcript"}}]"""
